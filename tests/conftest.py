import asyncio

import pytest
import pytest_asyncio
from starlette.testclient import TestClient

from app.main import app
from app.transactions.router import get_database
from tests.utils import SAMPLE_TRANSACTIONS, create_database


@pytest_asyncio.fixture
async def database(tmp_path):
    db = await create_database(tmp_path / "transactions.db")
    yield db
    await db.dispose()


@pytest.fixture()
def api_records():
    return SAMPLE_TRANSACTIONS


@pytest.fixture()
def api_database(tmp_path, api_records):
    # the test client runs the app in its own event loop
    db = asyncio.run(create_database(tmp_path / "api.db", api_records))
    yield db
    asyncio.run(db.dispose())


@pytest.fixture()
def test_client(api_database):
    app.dependency_overrides[get_database] = lambda: api_database
    # starlette re-raises unhandled errors after the 500 response is sent
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()
