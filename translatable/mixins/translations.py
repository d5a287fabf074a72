"""Translation support for any model: per-locale property values.

A model opts in by mixing in ``HasTranslations`` and listing the properties
that may be translated::

    class Product(HasTranslations, db.Model):
        __tablename__ = 'products'
        translatable_keys = ('title', 'description')

        id = db.Column(db.Integer, primary_key=True)

Rows live in the shared ``translations`` table, keyed by the model's class
name and id. Each instance caches its rows grouped by locale id; resolved
values are exposed through the additional-property overlay rather than as
mapped columns.
"""

import logging

from sqlalchemy import delete, event
from sqlalchemy.exc import SQLAlchemyError

from translatable import db
from translatable.models import Locale, Translation
from translatable.services.locales import get_locales
from translatable.services.request_locale import get_request_locale

logger = logging.getLogger(__name__)


class HasTranslations:
    """Mixin giving a model cached, locale-aware translated properties."""

    translatable_keys = ()

    # -- declarations supplied by the model -------------------------------

    @classmethod
    def translatable_type_name(cls) -> str:
        return cls.__name__

    def translation_keys(self) -> list:
        """Properties allowed to have translations."""
        return list(self.translatable_keys)

    def mutated_property_value(self, key, value):
        """Value stored for ``key``. Override to normalise input."""
        return value

    # -- additional property overlay --------------------------------------

    def _overlay(self) -> dict:
        if getattr(self, '_additional_properties', None) is None:
            self._additional_properties = {}
        return self._additional_properties

    def set_raw_additional_property(self, key, value):
        self._overlay()[key] = value
        return self

    def get_additional_property(self, key, default=None):
        return self._overlay().get(key, default)

    def additional_properties(self) -> dict:
        return dict(self._overlay())

    def to_translated_dict(self, data: dict) -> dict:
        """Merge resolved translations into a serialised model.

        Raw translation rows are never exposed.
        """
        result = {k: v for k, v in data.items() if k != 'translations'}
        result.update(self._overlay())
        return result

    # -- storage ----------------------------------------------------------

    def _translations_query(self):
        return Translation.query.filter_by(
            translatable_type=self.translatable_type_name(),
            translatable_id=self.id,
        )

    @property
    def translations(self) -> list:
        """Every translation row of this model."""
        if self.id is None:
            return []
        return self._translations_query().order_by(Translation.id).all()

    def create_translation(self, key, locale_id) -> Translation:
        """New, unsaved translation row bound to this model."""
        return Translation(
            translatable_type=self.translatable_type_name(),
            translatable_id=self.id,
            locale_id=locale_id,
            property=key,
        )

    def delete_translations(self, connection=None):
        """Delete every translation row of this model.

        Inside a flush the statement must go through the flush's connection.
        """
        table = Translation.__table__
        stmt = delete(table).where(
            table.c.translatable_type == self.translatable_type_name(),
            table.c.translatable_id == self.id,
        )
        if connection is not None:
            connection.execute(stmt)
        else:
            db.session.execute(stmt)

        self._cached_locale_translations = {}
        return self

    # -- per-instance cache -----------------------------------------------

    def get_cached_locale_translations(self) -> dict:
        """Rows cached so far, keyed by locale id."""
        if getattr(self, '_cached_locale_translations', None) is None:
            self._cached_locale_translations = {}
        return self._cached_locale_translations

    def forget_cached_translations(self):
        self._cached_locale_translations = {}
        return self

    def group_translations_by_locale(self, rows) -> dict:
        """Group rows by locale id and make the grouping the new cache."""
        groups = {}
        for row in rows:
            groups.setdefault(row.locale_id, []).append(row)

        self._cached_locale_translations = groups
        return groups

    def get_translation_of_locale(self, locale_id) -> list:
        """Rows of one locale, loaded once and cached (even when empty)."""
        cached = self.get_cached_locale_translations()

        if locale_id in cached:
            return cached[locale_id]

        rows = []
        if self.id is not None:
            rows = self._translations_query().filter_by(locale_id=locale_id).order_by(Translation.id).all()

        cached[locale_id] = rows
        return rows

    def get_translation_model(self, key, locale_id):
        for row in self.get_translation_of_locale(locale_id):
            if row.property == key:
                return row
        return None

    # -- reading ------------------------------------------------------------

    def translation_of_current_request(self, groups: dict):
        """Pick the group to show for the current request.

        Order: the request locale (English when the request locale is not
        registered), then English, then the group with the lowest locale id.
        """
        if not groups:
            return None

        locales = get_locales()
        current = get_request_locale()

        if not locales.supports(current):
            current = Locale.ENGLISH_CODE

        if locales.supports(current):
            current_id = locales.id(current)
            if current_id in groups:
                return groups[current_id]

            if locales.supports(Locale.ENGLISH_CODE):
                english_id = locales.id(Locale.ENGLISH_CODE)
                if english_id in groups:
                    return groups[english_id]

        return groups[min(groups)]

    def _apply_translations(self, rows):
        groups = self.group_translations_by_locale(rows)

        if not groups:
            return self

        for row in self.translation_of_current_request(groups) or []:
            self.set_raw_additional_property(row.property, row.property_value)
        return self

    def load_translation(self, rows=None):
        """Cache the given rows (or all rows) and expose the request's locale."""
        return self._apply_translations(rows or self.translations)

    @classmethod
    def load_translations_for(cls, instances):
        """Load translations of many instances with a single query."""
        instances = [instance for instance in instances if instance.id is not None]
        if not instances:
            return instances

        rows = Translation.query.filter(
            Translation.translatable_type == cls.translatable_type_name(),
            Translation.translatable_id.in_([instance.id for instance in instances]),
        ).order_by(Translation.id).all()

        by_entity = {}
        for row in rows:
            by_entity.setdefault(row.translatable_id, []).append(row)

        for instance in instances:
            instance._apply_translations(by_entity.get(instance.id, []))
        return instances

    @staticmethod
    def get_properties_of_locale(rows, locale_id) -> dict:
        properties = {row.property: row.property_value for row in rows}
        # The caller may need the locale to group the values
        properties['locale_id'] = locale_id
        return properties

    def get_translation(self, locale_id) -> dict:
        """Property -> value mapping of one locale, plus ``locale_id``."""
        return self.get_properties_of_locale(self.get_translation_of_locale(locale_id), locale_id)

    @property
    def property_translations(self) -> list:
        """One property map per locale, ordered by locale id."""
        groups = {}
        for row in self.translations:
            groups.setdefault(row.locale_id, []).append(row)

        return [
            self.get_properties_of_locale(rows, locale_id)
            for locale_id, rows in sorted(groups.items())
        ]

    # -- writing ------------------------------------------------------------

    def _persist_translation(self, row, key) -> bool:
        try:
            db.session.add(row)
            db.session.commit()
            return True
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(
                f"Failed to save translation '{key}' of "
                f"{self.translatable_type_name()}#{row.translatable_id}: {e}"
            )
            return False

    def save_translations(self, properties: dict, locale_id, allow_all_props=False):
        """Create or update the given properties for one locale.

        Unless ``allow_all_props`` is set, keys missing from
        ``translation_keys()`` are ignored. A property that fails to persist
        is skipped and leaves the cache and overlay untouched.
        """
        allowed = self.translation_keys() or []

        for key, value in (properties or {}).items():
            if key not in allowed and not allow_all_props:
                continue

            row = self.get_translation_model(key, locale_id) or self.create_translation(key, locale_id)
            created = row.id is None
            mutated = self.mutated_property_value(key, value)
            row.property_value = mutated

            if not self._persist_translation(row, key):
                continue

            if created:
                self.get_translation_of_locale(locale_id).append(row)
            self.set_raw_additional_property(key, mutated)

        return self

    def save_all_translations(self, data: dict, allow_all_props=False):
        """Save every entry of ``data['property_translations']``.

        Each entry holds a ``locale_id`` plus property values; entries
        without a locale id are skipped.
        """
        for translation in data.get('property_translations') or []:
            translation = dict(translation)
            locale_id = translation.pop('locale_id', None)

            if locale_id:
                self.save_translations(translation, locale_id, allow_all_props)

        return self


@event.listens_for(HasTranslations, 'before_delete', propagate=True)
def delete_translations_of_deleted_model(mapper, connection, target):
    # Soft deletes never reach this hook; a physical delete always cascades
    if not hasattr(target, 'is_force_deleting') or target.is_force_deleting():
        target.delete_translations(connection)
