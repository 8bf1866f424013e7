"""Domain helpers for the entity shape (drafts, validation and name matching)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

NAME_MAX_LENGTH = 255
LIKE_ESCAPE = "/"


@dataclass(frozen=True)
class EntityDraft:
    """An entity that has not been stored yet (no id)."""

    number_value: Optional[int]
    name: Optional[str] = None


def is_valid_draft(draft: EntityDraft) -> bool:
    """Return True when the draft can be stored (number_value present)."""
    return draft.number_value is not None


def first_invalid_position(drafts: Iterable[EntityDraft]) -> Optional[int]:
    """Zero-based position of the first draft that cannot be stored, or None."""
    for position, draft in enumerate(drafts):
        if not is_valid_draft(draft):
            return position
    return None


def like_pattern(fragment: str | None) -> str:
    """
    LIKE pattern matching `fragment` literally anywhere in a value.

    Case is left alone: callers lower both sides in SQL so the column and
    the pattern go through the same lower().
    """
    needle = fragment or ""
    for char in (LIKE_ESCAPE, "%", "_"):
        needle = needle.replace(char, LIKE_ESCAPE + char)
    return f"%{needle}%"
