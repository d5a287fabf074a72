"""Database models for locales and their translation rows."""

from .locale import Locale
from .translation import Translation

__all__ = ['Locale', 'Translation']
