import pytest
from fastapi.testclient import TestClient

from rentdesk.core.config import Settings
from rentdesk.database import Database
from rentdesk.main import create_app


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite:///{tmp_path / 'rental_test.db'}",
        "STATIC_DIR": str(tmp_path / "dist"),
        "SEED_ON_STARTUP": True,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def client(settings):
    """Client against a freshly seeded store"""
    with TestClient(create_app(settings), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def empty_client(tmp_path):
    """Client against an empty store (seeding disabled)"""
    app = create_app(make_settings(tmp_path, SEED_ON_STARTUP=False))
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def database(settings):
    database = Database(settings.DATABASE_URL, enforce_foreign_keys=settings.ENFORCE_FOREIGN_KEYS)
    database.open()
    database.init_schema()
    yield database
    database.close()


@pytest.fixture
def db(database):
    yield from database.session()
