"""Translatable models used by the test suite."""

from translatable import db
from translatable.mixins import HasTranslations, SoftDeletes
from translatable.models import Translation


class Product(HasTranslations, db.Model):
    """Plain translatable model."""

    __tablename__ = 'products'

    translatable_keys = ('title', 'description')

    id = db.Column(db.Integer, primary_key=True)
    sku = db.Column(db.String(50), nullable=False)
    price = db.Column(db.Float, nullable=True)

    def mutated_property_value(self, key, value):
        if key == 'title' and isinstance(value, str):
            return value.strip()
        return value

    def to_dict(self):
        return self.to_translated_dict({
            'id': self.id,
            'sku': self.sku,
            'price': self.price,
        })


class Article(SoftDeletes, HasTranslations, db.Model):
    """Translatable model with soft deletes."""

    __tablename__ = 'articles'

    translatable_keys = ('headline',)

    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(100), nullable=False)


def add_rows(model, locale_id, **properties):
    """Insert translation rows directly, bypassing the model cache."""
    for key, value in properties.items():
        db.session.add(Translation(
            translatable_type=model.translatable_type_name(),
            translatable_id=model.id,
            locale_id=locale_id,
            property=key,
            property_value=value,
        ))
    db.session.commit()
