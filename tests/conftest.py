import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import superchase.models  # noqa: registers tables
from superchase.database import Base
from superchase.engine import ball_engine


@pytest.fixture
def db():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def force_outcome(monkeypatch):
    """Pin the sampled outcome of every following ball"""
    def _force(outcome: str):
        monkeypatch.setattr(ball_engine, "sample_outcome", lambda weights, rng: outcome)
    return _force
