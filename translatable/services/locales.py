"""Locale registry: maps locale codes (e.g. 'en', 'fr') to locale ids.

The code -> id mapping is kept in memory and mirrored in the shared cache so
every worker resolves codes without hitting the database. Unknown codes
resolve to the default locale instead of failing.
"""

import os
import logging
from collections.abc import Mapping

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from translatable import db
from translatable.exceptions import LocaleNotSupported, ValidationError
from translatable.models import Locale
from translatable.services.cache import SharedCache

logger = logging.getLogger(__name__)

BASELINE_LOCALE = 'en'
SEED_CHUNK_SIZE = 100

# Shared cache keys
LOCALE_IDS_KEY = 'locale_ids'
LOCALES_KEY = 'locales'


class LocaleRegistry:
    """Process-wide registry of the locales the application supports."""

    def __init__(self, store: SharedCache = None, default_locale: str = BASELINE_LOCALE):
        self.store = store or SharedCache()
        self.locale_ids = {}
        self.booted = False
        self._default_locale = default_locale

    def boot(self):
        """Load the code -> id mapping once, from the shared cache or the db."""
        if self.booted:
            return self

        locale_ids = self.store.get(LOCALE_IDS_KEY)

        if locale_ids is None:
            self.cache()
        else:
            self.locale_ids = dict(locale_ids)

        self.booted = True
        return self

    def supports(self, code) -> bool:
        self.boot()
        return code in self.locale_ids

    def id(self, code):
        """Return the id of ``code``, or of the default locale if unknown."""
        if self.supports(code):
            return self.locale_ids[code]

        default_id = self.locale_ids.get(self._default_locale)
        if default_id is None:
            logger.warning(f"Default locale {self._default_locale} is not registered")
        return default_id

    def default_locale(self) -> str:
        return self._default_locale

    def default_locale_id(self):
        return self.id(self._default_locale)

    def set_default_locale(self, code):
        if not self.supports(code):
            raise LocaleNotSupported(code)

        self._default_locale = code
        return self

    @staticmethod
    def locale_insert_data(code, data):
        """Map seed/add input to Locale columns. Returns None for invalid data."""
        if not isinstance(data, Mapping):
            return None

        name = data.get('name')
        if name is None:
            return None

        locale = {
            'iso_code': code,
            'name': name,
        }
        if 'charset' in data:
            locale['charset'] = data['charset']
        if 'rtl' in data:
            locale['rtl'] = bool(data['rtl'])
        return locale

    def _validate(self, data):
        if not isinstance(data, Mapping):
            data = {}

        errors = {}

        if not data.get('name'):
            errors['name'] = ['The name field is required.']

        iso_code = data.get('iso_code')
        if not iso_code:
            errors['iso_code'] = ['The iso code field is required.']
        elif Locale.query.filter_by(iso_code=iso_code).first() is not None:
            errors['iso_code'] = ['The iso code has already been taken.']

        if errors:
            raise ValidationError(errors)

    def add(self, data: Mapping) -> Locale:
        """Validate and persist a new locale, then rebuild the cache."""
        self._validate(data)

        locale = Locale(**self.locale_insert_data(data['iso_code'], data))
        db.session.add(locale)

        try:
            db.session.commit()
        except IntegrityError as e:
            # Another writer registered the same code after validation
            db.session.rollback()
            raise ValidationError({'iso_code': ['The iso code has already been taken.']}) from e

        logger.info(f"Added locale {locale.iso_code} (id={locale.id})")
        self.cache()
        return locale

    def seed(self, locales: Mapping = None) -> int:
        """Insert the static locale list in one transaction.

        Entries without a name are skipped. Any failure rolls back every
        chunk and re-raises. Returns the number of inserted rows.
        """
        if locales is None:
            from translatable.data.locales import LOCALES
            locales = LOCALES

        items = list(locales.items())
        inserted = 0

        try:
            for start in range(0, len(items), SEED_CHUNK_SIZE):
                chunk = items[start:start + SEED_CHUNK_SIZE]
                rows = []
                for code, data in chunk:
                    row = self.locale_insert_data(code, data)
                    if row:
                        rows.append({'charset': None, 'rtl': False, **row})

                if rows:
                    db.session.execute(insert(Locale), rows)
                    inserted += len(rows)

            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Locale seeding failed, rolled back: {e}")
            raise

        logger.info(f"Seeded {inserted} locales")
        self.cache()
        return inserted

    def cache(self):
        """Rebuild the code -> id mapping from the database."""
        self.locale_ids = {
            locale.iso_code: locale.id
            for locale in Locale.query.order_by(Locale.id).all()
        }
        self.store.put(LOCALE_IDS_KEY, dict(self.locale_ids))
        self.store.forget(LOCALES_KEY)

        logger.info(f"Cached {len(self.locale_ids)} locale ids")
        return self

    def all(self) -> list:
        """Return every registered locale as a dictionary."""
        locales = self.store.get(LOCALES_KEY)

        if locales is None:
            locales = [locale.to_dict() for locale in Locale.query.order_by(Locale.id).all()]
            self.store.put(LOCALES_KEY, locales)

        return locales

    def clear_cache(self):
        self.store.forget(LOCALE_IDS_KEY)
        self.store.forget(LOCALES_KEY)
        self.locale_ids = {}
        self.booted = False
        return self

    def reset(self):
        """Clear the cache and restore the baseline default locale."""
        self.clear_cache()
        self._default_locale = BASELINE_LOCALE
        return self


_locales = None


def get_locales() -> LocaleRegistry:
    """Get or create the process-wide registry."""
    global _locales

    if _locales is None:
        _locales = LocaleRegistry(
            store=SharedCache(prefix=os.environ.get('LOCALE_CACHE_PREFIX', 'translatable:')),
            default_locale=os.environ.get('DEFAULT_LOCALE', BASELINE_LOCALE),
        )
    return _locales


def locale_id(code):
    """Shorthand for ``get_locales().id(code)``."""
    return get_locales().id(code)
