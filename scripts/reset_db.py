"""Reset the database to an empty campaigns table.

Drops and recreates every mapped table.

Usage:
    python -m scripts.reset_db
"""

import asyncio

from campaign_panel.core.database import Base, engine
import campaign_panel.models  # noqa: F401


async def reset_database():
    """Drop and recreate all tables."""
    print("=" * 60)
    print("Resetting database to empty state...")
    print("=" * 60)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        print("  Dropped tables: " + ", ".join(Base.metadata.tables))
        await conn.run_sync(Base.metadata.create_all)
        print("  Recreated tables")


async def main():
    await reset_database()

    print("\n" + "=" * 60)
    print("Reset complete!")
    print("=" * 60)
    print("\nTo re-seed the database, run:")
    print("  python -m scripts.seed_data")
    print("=" * 60)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
