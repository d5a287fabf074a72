"""Model mixins."""

from .translations import HasTranslations
from .soft_deletes import SoftDeletes

__all__ = ['HasTranslations', 'SoftDeletes']
