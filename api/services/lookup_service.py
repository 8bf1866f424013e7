"""Read use cases: list every entity and search by name fragment."""

from __future__ import annotations

import logging

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError

from api.db.models import SomeEntity
from api.db.session import get_session
from api.domain.entities import like_pattern
from api.repositories.sql_repository import EntityRepository
from api.services.errors import StoreError

logger = logging.getLogger(__name__)

_SELECT_ALL_SQL = text(
    """
    SELECT id, number_value, name
    FROM some_entity
    ORDER BY id
    """
)

_SELECT_BY_NAME_SQL = text(
    """
    SELECT id, number_value, name
    FROM some_entity
    WHERE lower(name) LIKE lower(:pattern) ESCAPE '/'
    ORDER BY id
    """
)


class LookupService:
    """Find-all and substring search, in repository style and in session style."""

    def __init__(self, repository: EntityRepository | None = None) -> None:
        self.repository = repository or EntityRepository()

    # ---------------------- repository style ----------------------
    def find_all(self) -> list[SomeEntity]:
        try:
            return self.repository.find_all()
        except SQLAlchemyError as exc:
            logger.exception("find_all_failed")
            raise StoreError("Store unavailable") from exc

    def find_by_name_contains(self, fragment: str | None) -> list[SomeEntity]:
        try:
            return self.repository.find_by_name_contains(fragment)
        except SQLAlchemyError as exc:
            logger.exception("find_by_name_failed fragment=%r", fragment)
            raise StoreError("Store unavailable") from exc

    # ----------------------- session style ------------------------
    def find_all_via_session(self) -> list[SomeEntity]:
        return self._run(_SELECT_ALL_SQL)

    def find_by_name_contains_via_session(self, fragment: str | None) -> list[SomeEntity]:
        return self._run(_SELECT_BY_NAME_SQL, {"pattern": like_pattern(fragment)})

    def _run(self, statement, params: dict | None = None) -> list[SomeEntity]:
        try:
            with get_session() as session:
                mapped = select(SomeEntity).from_statement(statement)
                return list(session.scalars(mapped, params or {}).all())
        except SQLAlchemyError as exc:
            logger.exception("session_query_failed params=%r", params)
            raise StoreError("Store unavailable") from exc
