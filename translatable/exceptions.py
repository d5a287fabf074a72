"""Errors raised by the locale registry."""


class TranslatableError(Exception):
    """Base class for errors raised by this package."""


class LocaleNotSupported(TranslatableError):
    """Raised when setting a default locale the application does not know."""

    def __init__(self, locale):
        self.locale = locale
        super().__init__(f"Locale {locale} is not supported by the application")


class ValidationError(TranslatableError):
    """Raised when locale data fails validation.

    ``errors`` maps each offending field to its list of messages.
    """

    def __init__(self, errors: dict):
        self.errors = errors
        self.fields = sorted(errors)
        super().__init__(f"Validation failed for: {', '.join(self.fields)}")

    def to_dict(self):
        return {'error': str(self), 'fields': self.errors}
