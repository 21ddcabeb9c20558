"""
Shared fixtures: an in-memory SQLite database per test and seeded demo data.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DIAGNOSIS_CREATE_TABLES", "0")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base, init_db
from diagnosis.seed import seed_demo_school


SCHOOL_ID = "school-a"
OTHER_SCHOOL_ID = "school-b"


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    Session = sessionmaker(bind=engine, autoflush=False, future=True)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded(db_session):
    """Demo data for SCHOOL_ID."""
    return seed_demo_school(db_session, SCHOOL_ID)


def answers(**overrides):
    """A full answer set (shibuya / Lv2 / adult / K-POP / healing / pace)."""
    base = {
        "Q1": "shibuya",
        "Q2": "2-3",
        "Q3": "3-5",
        "Q4": "4-1",
        "Q5": "5-1",
        "Q6": "6-1",
    }
    base.update(overrides)
    return base


@pytest.fixture
def make_answers():
    return answers
