"""Common CRUD operations over a single table.

Incident states, incident types and locations share the same lifecycle:
validate then insert, merge non-null fields on update, check existence
before delete. Subclasses only declare their model, their mutable fields,
their messages and a ``validate`` method.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from .errors import NotFoundError, ValidationError
from .validation import is_row_id

logger = logging.getLogger(__name__)


class EntityService:
    """CRUD service bound to one model and one session."""

    model: Any = None
    #: Columns a client may set; ``id`` is never among them.
    fields: Tuple[str, ...] = ()
    #: Formatted with ``id``.
    not_found_message = "Registro no encontrado con ID: {id}"
    in_use_message = "El registro está asociado a uno o más incidentes y no puede eliminarse"

    def __init__(self, session) -> None:
        self.session = session

    def validate(self, entity) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def find_all(self) -> List[Any]:
        """Return every row ordered by id."""
        return list(self.session.scalars(select(self.model).order_by(self.model.id)).all())

    def find_by_id(self, entity_id: int):
        """Return the row with ``entity_id`` or raise :class:`NotFoundError`."""
        entity = self.session.get(self.model, entity_id) if is_row_id(entity_id) else None
        if entity is None:
            raise NotFoundError(self.not_found_message.format(id=entity_id))
        return entity

    def save(self, entity, commit: bool = True):
        """Validate and insert ``entity``.

        With ``commit=False`` the row is only flushed: it gets its id but the
        transaction stays open so a caller can group several saves.
        """
        self.validate(entity)
        self.session.add(entity)
        if commit:
            self.session.commit()
            logger.info("%s %s created", self.model.__name__, entity.id)
        else:
            self.session.flush()
        return entity

    def update(self, entity, entity_id: int, commit: bool = True):
        """Overwrite the stored row with the non-null fields of ``entity``.

        The merged values are validated before anything touches the stored
        row, so a rejected update leaves it unchanged. ``commit=False``
        only flushes, as in :meth:`save`.
        """
        existing = self.find_by_id(entity_id)
        incoming = self.changes(entity)
        candidate = self.model(**{name: incoming.get(name, getattr(existing, name)) for name in self.fields})
        self.validate(candidate)

        for name, value in incoming.items():
            setattr(existing, name, value)
        if not commit:
            self.session.flush()
            return existing
        self.session.commit()
        logger.info("%s %s updated (%s)", self.model.__name__, entity_id, ", ".join(sorted(incoming)) or "no changes")
        return existing

    def delete(self, entity_id: int) -> None:
        """Remove the row; rows still referenced by incidents are refused."""
        entity = self.find_by_id(entity_id)
        self.session.delete(entity)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ValidationError(self.in_use_message) from exc
        logger.info("%s %s deleted", self.model.__name__, entity_id)

    def changes(self, entity) -> dict:
        """Non-null values of ``entity`` for the mutable fields."""
        changes = {}
        for name in self.fields:
            value: Optional[Any] = getattr(entity, name, None)
            if value is not None:
                changes[name] = value
        return changes
