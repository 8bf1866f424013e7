#!/usr/bin/env python3
"""
Insert generated entities through either access style.

Usage:
  python scripts/seed_entities.py --count 10000 [--batch-size 50] [--style session|repository] [--prefix item]
"""
from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

# Make the api package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.logs import setup_logging  # noqa: E402
from api.db.create_tables import create_all  # noqa: E402
from api.domain.entities import EntityDraft  # noqa: E402
from api.services.bulk_loader import BulkLoader  # noqa: E402
from api.services.errors import EntityError  # noqa: E402


def make_drafts(count: int, prefix: str, seed: int | None = None) -> list[EntityDraft]:
    rng = random.Random(seed)
    return [EntityDraft(number_value=rng.randint(0, 1_000_000), name=f"{prefix}-{i}") for i in range(count)]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Seed the some_entity table")
    ap.add_argument("--count", type=int, required=True, help="Number of entities to insert")
    ap.add_argument("--batch-size", type=int, default=None, help="Flush cadence for the session style")
    ap.add_argument("--style", choices=("session", "repository"), default="session")
    ap.add_argument("--prefix", default="item", help="Name prefix (default: item)")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for numberValue")
    ap.add_argument("--create-schema", action="store_true", help="Create tables before inserting")
    args = ap.parse_args(argv)

    if args.count < 0:
        raise SystemExit("--count must be >= 0")
    if args.batch_size is not None and args.batch_size < 1:
        raise SystemExit("--batch-size must be >= 1")

    setup_logging()
    if args.create_schema:
        create_all()

    loader = BulkLoader()
    drafts = make_drafts(args.count, args.prefix, args.seed)
    started = time.perf_counter()
    if args.style == "session":
        result = loader.bulk_insert(drafts, args.batch_size)
        inserted, flushes = result.inserted, result.flushes
    else:
        inserted, flushes = loader.save_all(drafts), None
    elapsed = time.perf_counter() - started

    print(f"OK: {inserted} entities inserted ({args.style} style)")
    if flushes is not None:
        print(f"  flushes: {flushes}")
    print(f"  elapsed: {elapsed:.3f}s")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except EntityError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
