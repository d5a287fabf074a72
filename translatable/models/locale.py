"""Locale model for the languages the application supports."""

from datetime import datetime
from translatable import db


class Locale(db.Model):
    """A supported language/region, e.g. 'en' or 'fr'."""

    __tablename__ = 'locales'

    ENGLISH_CODE = 'en'

    id = db.Column(db.Integer, primary_key=True)
    iso_code = db.Column(db.String(20), unique=True, nullable=False, index=True)  # e.g., 'en', 'pt-BR'
    name = db.Column(db.String(100), nullable=False)  # e.g., 'English'
    charset = db.Column(db.String(50), nullable=True)
    rtl = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=True)

    def to_dict(self):
        """Convert locale to dictionary."""
        return {
            'id': self.id,
            'iso_code': self.iso_code,
            'name': self.name,
            'charset': self.charset,
            'rtl': self.rtl,
        }

    def __repr__(self):
        return f'<Locale {self.iso_code}: {self.name}>'
