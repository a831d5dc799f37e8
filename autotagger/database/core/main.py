# autotagger/database/core/main.py
from __future__ import annotations

from typing import Iterator, Optional

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from autotagger.common.settings import get_settings
from autotagger.domain.policies.path_pattern import compile_path_pattern

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# SQL function name used by the repos for regex criteria
REGEXP_FUNCTION = "autotag_regexp"


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def regexp_search(pattern: Optional[str], value: Optional[str]) -> int:
    """SQL-callable: 1 when `pattern` is found anywhere in `value`, else 0."""
    if pattern is None or value is None:
        return 0
    return 1 if compile_path_pattern(pattern).search(value) else 0


def _install_functions(dbapi_conn, _) -> None:
    # sqlite3 connections expose create_function; other drivers are expected
    # to provide a server-side autotag_regexp().
    create_function = getattr(dbapi_conn, "create_function", None)
    if create_function is not None:
        create_function(REGEXP_FUNCTION, 2, regexp_search, deterministic=True)


def _sqlite_autocommit_driver(dbapi_conn, _) -> None:
    # let SQLAlchemy emit BEGIN itself so SAVEPOINT (begin_nested) works on pysqlite
    dbapi_conn.isolation_level = None


def _sqlite_begin(conn) -> None:
    conn.exec_driver_sql("BEGIN")


def make_engine(url: str, *, echo: bool = False, **kwargs) -> Engine:
    """Create an engine with the auto-tag SQL helpers registered on every connection."""
    engine = create_engine(url, echo=echo, future=True, **kwargs)
    event.listen(engine, "connect", _install_functions)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _sqlite_autocommit_driver)
        event.listen(engine, "begin", _sqlite_begin)
    return engine


engine = make_engine(_settings.database_url, echo=_settings.db.echo)

SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)


def get_session() -> Iterator[Session]:
    """
    Yield a transaction-scoped Session.
    Commits on success, rolls back on error.
    """
    session: Session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
