"""Translation model holding one property value of one entity in one locale."""

from datetime import datetime
from translatable import db


class Translation(db.Model):
    """A single translated property of a translatable entity.

    The owning entity is referenced polymorphically through
    ``translatable_type`` (the entity class name) and ``translatable_id``.
    """

    __tablename__ = 'translations'

    id = db.Column(db.Integer, primary_key=True)
    translatable_type = db.Column(db.String(100), nullable=False)
    translatable_id = db.Column(db.Integer, nullable=False)
    locale_id = db.Column(db.Integer, db.ForeignKey('locales.id'), nullable=False, index=True)
    property = db.Column(db.String(100), nullable=False)
    property_value = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # One row per entity/locale/property
    __table_args__ = (
        db.UniqueConstraint(
            'translatable_type', 'translatable_id', 'locale_id', 'property',
            name='unique_entity_locale_property'
        ),
        db.Index('ix_translations_translatable', 'translatable_type', 'translatable_id'),
    )

    def to_dict(self):
        """Convert translation to dictionary."""
        return {
            'id': self.id,
            'translatable_type': self.translatable_type,
            'translatable_id': self.translatable_id,
            'locale_id': self.locale_id,
            'property': self.property,
            'property_value': self.property_value,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Translation {self.translatable_type}#{self.translatable_id} {self.property}@{self.locale_id}>'
