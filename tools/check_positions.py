#!/usr/bin/env python3
"""Report position gaps and duplicates in every ordered collection.

Uses the same DATABASE_URL_OVERRIDE / DB_* settings as the service.

Usage (from the project root):
    uv run python tools/check_positions.py
    uv run python tools/check_positions.py --fix
    uv run python tools/check_positions.py --collection faqs
"""

import argparse
import asyncio
import sys

from cms_admin.db import async_session_maker, engine, schema_guard
from cms_admin.services import POSITIONED_REPOSITORIES


async def run(collections: list[str] | None, fix: bool) -> int:
    """Check (and optionally compact) each collection. Returns the number still broken."""
    await schema_guard.ensure(engine)
    broken = 0

    async with async_session_maker() as session:
        for repository_cls in POSITIONED_REPOSITORIES:
            repository = repository_cls(session)
            if collections and repository.collection not in collections:
                continue

            report = await repository.check_density()
            if report.is_dense:
                print(f"{report.collection}: OK ({report.count} rows)")
                continue

            print(
                f"{report.collection}: {report.count} rows, "
                f"missing positions {report.gaps}, duplicated positions {report.duplicates}"
            )
            if fix:
                changed = await repository.compact()
                print(f"  compacted, {changed} rows renumbered")
            else:
                broken += 1

        await session.commit()

    await engine.dispose()
    return broken


def main():
    parser = argparse.ArgumentParser(
        description="Check that every ordered collection has positions 0..N-1."
    )
    parser.add_argument(
        "--collection", "-c", action="append", help="Table to check (repeatable)"
    )
    parser.add_argument(
        "--fix", action="store_true", help="Renumber broken collections in place"
    )
    args = parser.parse_args()

    broken = asyncio.run(run(args.collection, args.fix))
    sys.exit(1 if broken else 0)


if __name__ == "__main__":
    main()
