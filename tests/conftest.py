import os

# cheap hashes for the test run; must be set before app.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from app.api.seed import get_fixtures
from app.db.engine import build_engine, get_engine
from app.main import app
from app.models.seed import SeedFixtures


@pytest.fixture()
def engine(tmp_path):
    # file-backed so every seeding thread gets its own connection
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    yield engine
    engine.dispose()


@pytest.fixture()
def fixtures() -> SeedFixtures:
    return SeedFixtures()


@pytest.fixture()
def client(engine, fixtures):
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_fixtures] = lambda: fixtures
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def count_rows(engine, table) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(table)).scalar_one()


def fetch_rows(engine, table):
    with engine.connect() as conn:
        return [dict(row) for row in conn.execute(select(table)).mappings().all()]
