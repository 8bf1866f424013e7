"""Pydantic schemas for the entity endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from api.domain.entities import NAME_MAX_LENGTH, EntityDraft


class EntityPayload(BaseModel):
    """
    One entity in an insert request body.

    `id` is accepted for compatibility but ignored; ids are store-assigned.
    A missing `numberValue` is reported by the service with its position.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    number_value: Optional[int] = Field(default=None, alias="numberValue")
    name: Optional[str] = Field(default=None, max_length=NAME_MAX_LENGTH)

    def to_draft(self) -> EntityDraft:
        return EntityDraft(number_value=self.number_value, name=self.name)
