"""Utility script to create (or drop) the database schema."""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all() -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)


def drop_all() -> None:
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create or drop the some_entity schema.")
    parser.add_argument("--drop", action="store_true", help="Drop tables before creating them")
    args = parser.parse_args()
    try:
        if args.drop:
            drop_all()
        create_all()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
