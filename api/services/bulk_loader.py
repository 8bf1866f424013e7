"""
Bulk insert use cases.

`BulkLoader.bulk_insert` stages entities on one write session and performs a
flush-and-release after every full batch, so the session never tracks more
than `batch_size` unflushed objects. `BulkLoader.save_all` is the
repository-style counterpart: everything is added and committed at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, ContextManager, Iterable, Protocol, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.core.config import get_settings
from api.db.models import SomeEntity
from api.db.session import write_session
from api.domain.entities import EntityDraft, first_invalid_position
from api.repositories.sql_repository import EntityRepository
from api.services.errors import StoreError, ValidationError

logger = logging.getLogger(__name__)


class WriteSession(Protocol):
    def stage(self, entity: SomeEntity) -> None: ...

    def flush(self) -> None: ...

    def release(self) -> None: ...


class SessionWriteAdapter:
    """WriteSession over a SQLAlchemy Session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def stage(self, entity: SomeEntity) -> None:
        self.session.add(entity)

    def flush(self) -> None:
        self.session.flush()

    def release(self) -> None:
        # Flushed rows stay in the open transaction; only the identity map is dropped.
        self.session.expunge_all()


@dataclass(frozen=True)
class BulkInsertResult:
    inserted: int
    flushes: int
    batch_size: int


def _validate(drafts: Sequence[EntityDraft]) -> None:
    position = first_invalid_position(drafts)
    if position is not None:
        raise ValidationError(position)


class BulkLoader:
    """Inserts batches of new entities."""

    def __init__(
        self,
        *,
        session_scope: Callable[[], ContextManager] = write_session,
        writer_factory: Callable[..., WriteSession] = SessionWriteAdapter,
        repository: EntityRepository | None = None,
    ) -> None:
        self.session_scope = session_scope
        self.writer_factory = writer_factory
        self.repository = repository or EntityRepository()

    def resolve_batch_size(self, batch_size: int | None) -> int:
        if batch_size is None:
            return get_settings().bulk_batch_size
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")
        return batch_size

    def bulk_insert(self, drafts: Iterable[EntityDraft], batch_size: int | None = None) -> BulkInsertResult:
        size = self.resolve_batch_size(batch_size)
        items = list(drafts)
        _validate(items)
        if not items:
            return BulkInsertResult(inserted=0, flushes=0, batch_size=size)

        flushes = 0
        staged = 0
        try:
            with self.session_scope() as session:
                writer = self.writer_factory(session)
                for draft in items:
                    writer.stage(SomeEntity(number_value=draft.number_value, name=draft.name))
                    staged += 1
                    if staged == size:
                        self._flush_and_release(writer, staged)
                        flushes += 1
                        staged = 0
                if staged:
                    self._flush_and_release(writer, staged)
                    flushes += 1
        except SQLAlchemyError as exc:
            logger.exception("bulk_insert_failed total=%s batch_size=%s flushes=%s", len(items), size, flushes)
            raise StoreError("Store rejected bulk insert") from exc

        logger.info("bulk_insert_complete inserted=%s flushes=%s batch_size=%s", len(items), flushes, size)
        return BulkInsertResult(inserted=len(items), flushes=flushes, batch_size=size)

    def _flush_and_release(self, writer: WriteSession, staged: int) -> None:
        writer.flush()
        writer.release()
        logger.debug("bulk_insert_flush staged=%s", staged)

    def save_all(self, drafts: Iterable[EntityDraft]) -> int:
        items = list(drafts)
        _validate(items)
        try:
            inserted = self.repository.save_all(items)
        except SQLAlchemyError as exc:
            logger.exception("save_all_failed total=%s", len(items))
            raise StoreError("Store rejected save_all") from exc
        logger.info("save_all_complete inserted=%s", inserted)
        return inserted
