import asyncio

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database import Store, create_db_and_tables
from app.main import create_app
from app.seed import seed_catalog


# (pizza_type_id, name, category, ingredients, {size: price})
TEST_CATALOG = [
    ("1", "The Pepperoni Pizza", "Classic", "Mozzarella Cheese, Pepperoni",
     {"S": 9.75, "M": 12.5, "L": 15.25}),
    ("2", "The Hawaiian Pizza", "Classic", "Sliced Ham, Pineapple, Mozzarella Cheese",
     {"S": 10.5, "M": 13.25, "L": 16.5}),
    ("3", "The Four Cheese Pizza", "Veggie", "Ricotta, Gorgonzola, Mozzarella, Parmigiano",
     {"M": 14.75, "L": 17.95}),
    # no price rows on purpose
    ("4", "The Mystery Pizza", "Supreme", None, {}),
]


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        ENV="local",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'pizza.db'}",
        static_dir=str(tmp_path / "public"),
        past_orders_page_size=2,
        db_timeout_seconds=5.0,
    )


@pytest.fixture
async def empty_store(settings):
    """Store with the schema created and no catalog."""
    store = Store.from_settings(settings)
    await create_db_and_tables(store)
    yield store
    await store.dispose()


@pytest.fixture
async def store(empty_store):
    """Store with the test catalog loaded."""
    await seed_catalog(empty_store, TEST_CATALOG)
    return empty_store


async def _prepare_database(settings, catalog):
    store = Store.from_settings(settings)
    try:
        await create_db_and_tables(store)
        if catalog:
            await seed_catalog(store, catalog)
    finally:
        await store.dispose()


@pytest.fixture
def client(settings):
    """HTTP client over an app with the test catalog loaded."""
    asyncio.run(_prepare_database(settings, TEST_CATALOG))
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def empty_client(settings):
    """HTTP client over an app with an empty catalog."""
    asyncio.run(_prepare_database(settings, None))
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def cors_client(settings):
    """HTTP client over an app that also allows one extra frontend origin."""
    settings = settings.model_copy(update={"allowed_origins": "https://pizza.example.com"})
    asyncio.run(_prepare_database(settings, TEST_CATALOG))
    with TestClient(create_app(settings)) as client:
        yield client
