import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from autotagger.database.core import main as core
from autotagger.database.models import Base, Performer
from autotagger.domain.policies.path_pattern import build_path_pattern


@pytest.fixture()
def scratch_sessions(monkeypatch):
    engine = core.make_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(core, "SessionLocal", sessionmaker(bind=engine, expire_on_commit=False, future=True))
    yield engine
    engine.dispose()


def _count(engine) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(Performer)).scalar_one()


def test_get_session_commits_on_success(scratch_sessions):
    gen = core.get_session()
    session = next(gen)
    session.add(Performer(id=1, name="performer name"))
    with pytest.raises(StopIteration):
        next(gen)

    assert _count(scratch_sessions) == 1


def test_get_session_rolls_back_on_error(scratch_sessions):
    gen = core.get_session()
    session = next(gen)
    session.add(Performer(id=1, name="performer name"))
    session.flush()
    with pytest.raises(RuntimeError):
        gen.throw(RuntimeError("boom"))

    assert _count(scratch_sessions) == 0


def test_regexp_function_is_registered(db):
    pattern = build_path_pattern("performer name", separator="/")
    hit = db.execute(select(func.autotag_regexp(pattern, "dir/Performer_Name.mp4"))).scalar_one()
    miss = db.execute(select(func.autotag_regexp(pattern, "performernames.mp4"))).scalar_one()
    null = db.execute(select(func.autotag_regexp(pattern, None))).scalar_one()

    assert (hit, miss, null) == (1, 0, 0)
    assert core.regexp_search(None, "x") == 0
