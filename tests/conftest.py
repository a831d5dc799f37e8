# tests/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from autotagger.common import settings as settings_mod
from autotagger.database.core.main import make_engine
from autotagger.database.models import Base  # <-- imports models/metadata


@pytest.fixture(autouse=True)
def _fresh_settings():
    # settings are cached process-wide; tests that tweak env must not leak
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture(scope="session")
def db_engine() -> Engine:
    # one shared in-memory database for the whole session
    engine = make_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db(db_engine) -> Session:
    """
    Per-test SQLAlchemy Session bound to a transaction (rolled back after each test).
    """
    connection = db_engine.connect()
    trans = connection.begin()
    session = Session(bind=connection, future=True, join_transaction_mode="create_savepoint")
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()
