"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Iterable

from sqlalchemy import func, literal, select

from api.db.models import SomeEntity
from api.db.session import get_session, write_session
from api.domain.entities import LIKE_ESCAPE, EntityDraft, like_pattern


class EntityRepository:
    """Repository-style access to SomeEntity; every call opens its own session."""

    def query(self, *criteria) -> list[SomeEntity]:
        """Single parameterised query; callers pass explicit predicates."""
        with get_session() as session:
            stmt = select(SomeEntity).where(*criteria).order_by(SomeEntity.id)
            return list(session.execute(stmt).scalars().all())

    def find_all(self) -> list[SomeEntity]:
        return self.query()

    def find_by_name_contains(self, fragment: str | None) -> list[SomeEntity]:
        pattern = func.lower(literal(like_pattern(fragment)))
        return self.query(func.lower(SomeEntity.name).like(pattern, escape=LIKE_ESCAPE))

    def count(self) -> int:
        with get_session() as session:
            return session.execute(select(func.count()).select_from(SomeEntity)).scalar_one()

    def save_all(self, drafts: Iterable[EntityDraft]) -> int:
        """Add every draft to one session and commit once. Returns rows written."""
        entities = [SomeEntity(number_value=d.number_value, name=d.name) for d in drafts]
        if not entities:
            return 0
        with write_session() as session:
            session.add_all(entities)
        return len(entities)
