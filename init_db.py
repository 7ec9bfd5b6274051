"""Create the pizza tables and load the sample catalog.

Usage: python init_db.py
"""
import asyncio
import logging

from app.config import settings
from app.database import Store, create_db_and_tables
from app.seed import seed_catalog

logger = logging.getLogger(__name__)


async def init_db():
    store = Store.from_settings(settings)
    try:
        await create_db_and_tables(store)
        added = await seed_catalog(store)
        logger.info(f"Database initialization completed ({added} pizza types added)")
    finally:
        await store.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    asyncio.run(init_db())
