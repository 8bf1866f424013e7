"""SQLAlchemy model for the single persisted entity."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class SomeEntity(Base):
    __tablename__ = "some_entity"

    id = Column(Integer, primary_key=True, autoincrement=True)
    number_value = Column(Integer, nullable=False)
    name = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"SomeEntity(id={self.id!r}, number_value={self.number_value!r}, name={self.name!r})"
