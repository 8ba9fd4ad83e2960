"""Seed script to populate the local database with sample bookmarks.

Usage:
    PYTHONPATH=src python scripts/seed_data.py populate
    PYTHONPATH=src python scripts/seed_data.py populate --force
    PYTHONPATH=src python scripts/seed_data.py clear
"""

import argparse
import asyncio

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import get_settings
from models import Bookmark
from schemas.validators import validate_bookmark
from services.bookmark_service import BookmarkService

BOOKMARKS = [
    {
        'title': 'Google',
        'url': 'http://www.google.com',
        'rating': 3,
        'description': 'Internet-related services and products.',
    },
    {
        'title': 'Thinkful',
        'url': 'http://www.thinkful.com',
        'rating': 5,
        'description': '1-on-1 learning to accelerate your way to a new high-growth tech career!',
    },
    {
        'title': 'Github',
        'url': 'http://www.github.com',
        'rating': 4,
        'description': "brings together the world's largest community of developers.",
    },
]


async def create_bookmarks(session: AsyncSession) -> None:
    """Insert the sample bookmarks through the same validation as the API."""
    service = BookmarkService(session)
    for data in BOOKMARKS:
        await service.create_bookmark(validate_bookmark(data))
    print(f'  Created {len(BOOKMARKS)} bookmarks')


async def clear_data(session: AsyncSession) -> None:
    """Delete every bookmark."""
    result = await session.execute(delete(Bookmark))
    print(f'  Deleted {result.rowcount} bookmarks')


async def populate(force: bool = False) -> None:
    """Populate the database with seed data."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            count = (await session.execute(
                select(func.count()).select_from(Bookmark),
            )).scalar()

            if count:
                if force:
                    print('Existing data found, clearing first (--force)...')
                    await clear_data(session)
                    await session.flush()
                else:
                    print(
                        f'Data already exists ({count} bookmarks). '
                        f'Use --force to clear and re-seed.'
                    )
                    return

            print('Populating seed data...')
            await create_bookmarks(session)
            await session.commit()
            print('Seed data created successfully.')
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()


async def clear() -> None:
    """Clear all bookmarks."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            await clear_data(session)
            await session.commit()
            print('Clear complete.')
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description='Seed the database with sample bookmarks.')
    subparsers = parser.add_subparsers(dest='command', required=True)

    populate_parser = subparsers.add_parser('populate', help='Populate database with sample bookmarks')
    populate_parser.add_argument(
        '--force', action='store_true',
        help='Clear existing data before populating',
    )

    subparsers.add_parser('clear', help='Remove all bookmarks')

    args = parser.parse_args()

    if args.command == 'populate':
        asyncio.run(populate(force=args.force))
    elif args.command == 'clear':
        asyncio.run(clear())


if __name__ == '__main__':
    main()
