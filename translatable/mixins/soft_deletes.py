"""Soft delete support: rows are stamped with ``deleted_at`` instead of removed."""

from datetime import datetime

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from translatable import db


class SoftDeletes:
    """Mixin for models that are hidden rather than deleted."""

    deleted_at = db.Column(db.DateTime, nullable=True, index=True)

    _force_deleting = False

    @classmethod
    def without_trashed(cls):
        """Query of the rows that are not soft deleted."""
        return cls.query.filter(cls.deleted_at.is_(None))

    def trashed(self) -> bool:
        return self.deleted_at is not None

    def is_force_deleting(self) -> bool:
        """True while the row is being physically removed.

        ``soft_delete()`` is an UPDATE, so any delete issued through the
        session counts, not just ``force_delete()``.
        """
        if self._force_deleting:
            return True

        state = inspect(self)
        return state.deleted or (state.session is not None and self in state.session.deleted)

    def soft_delete(self):
        """Mark the row as deleted and keep it (and its translations)."""
        self.deleted_at = datetime.utcnow()
        db.session.commit()
        return self

    def restore(self):
        self.deleted_at = None
        db.session.commit()
        return self

    def force_delete(self):
        """Remove the row for good."""
        self._force_deleting = True
        try:
            db.session.delete(self)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        finally:
            self._force_deleting = False
        return self
