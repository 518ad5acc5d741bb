"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from contextlib import contextmanager
from pathlib import Path

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from app.catalog.repository import InMemoryCatalog
from app.domains.plan_generator.enums import Equipment
from app.domains.plan_generator.models import Category, Exercise

SEED_CATALOG_PATH = Path(__file__).parent.parent / "data" / "seed" / "catalog.yaml"


def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign key constraints in SQLite connections."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def test_user_id() -> str:
    """Stable user ID for tests."""
    return "user-1"


@pytest.fixture
def exercise_categories() -> dict[str, Category]:
    names = ["Chest", "Back", "Legs", "Glutes", "Shoulders", "Biceps", "Triceps", "Core"]
    return {name: Category(id=i, name=name) for i, name in enumerate(names, start=1)}


@pytest.fixture
def plan_categories() -> list[Category]:
    names = ["Full Body", "Upper/Lower", "Split Routine", "Strength", "Endurance", "Hypertrophy"]
    return [Category(id=i, name=name) for i, name in enumerate(names, start=1)]


@pytest.fixture
def sample_exercises(exercise_categories) -> list[Exercise]:
    """Small catalog covering every category.

    Arm isolation work is cable-only, so barbell/dumbbell pools have no
    biceps or triceps isolation exercises.
    """
    c = exercise_categories

    def ex(id_, name, primary, secondaries=(), equipment=Equipment.NONE, owner=None):
        return Exercise(
            id=id_,
            name=name,
            primary_category=c[primary],
            secondary_categories=tuple(c[s] for s in secondaries),
            required_equipment=equipment,
            owner_user_id=owner,
        )

    return [
        ex(1, "Flat Barbell Bench Press", "Chest", ("Triceps", "Shoulders"), Equipment.BARBELL),
        ex(2, "Incline Dumbbell Press", "Chest", ("Shoulders",), Equipment.DUMBBELL),
        ex(3, "Push-Ups", "Chest", ("Triceps", "Core")),
        ex(4, "Dumbbell Flyes", "Chest", (), Equipment.DUMBBELL),
        ex(5, "Deadlift", "Back", ("Legs", "Glutes", "Core"), Equipment.BARBELL),
        ex(6, "Barbell Rows", "Back", ("Biceps",), Equipment.BARBELL),
        ex(7, "Single-Arm Dumbbell Row", "Back", ("Biceps",), Equipment.DUMBBELL),
        ex(8, "Lat Pulldown", "Back", ("Biceps",), Equipment.CABLE),
        ex(9, "Back Squat", "Legs", ("Glutes", "Core"), Equipment.BARBELL),
        ex(10, "Goblet Squat", "Legs", ("Core",), Equipment.DUMBBELL),
        ex(11, "Leg Extension", "Legs", (), Equipment.MACHINE),
        ex(12, "Overhead Press", "Shoulders", ("Triceps", "Core"), Equipment.BARBELL),
        ex(13, "Dumbbell Lateral Raise", "Shoulders", (), Equipment.DUMBBELL),
        ex(14, "Cable Curl", "Biceps", (), Equipment.CABLE),
        ex(15, "Tricep Pushdown", "Triceps", (), Equipment.CABLE),
        ex(16, "Plank", "Core"),
        ex(17, "Cable Crunch", "Core", (), Equipment.CABLE),
        ex(18, "Barbell Hip Thrust", "Glutes", (), Equipment.BARBELL),
        ex(19, "Landmine Press", "Shoulders", ("Chest",), Equipment.BARBELL, owner="user-1"),
        ex(20, "Spider Curl", "Biceps", (), Equipment.DUMBBELL, owner="user-2"),
    ]


@pytest.fixture
def in_memory_catalog(sample_exercises, plan_categories) -> InMemoryCatalog:
    return InMemoryCatalog(sample_exercises, plan_categories)


@pytest.fixture(scope="function")
def db_session(monkeypatch):
    """
    Provides a transactional in-memory SQLite DB session for tests.

    This fixture:
    - Creates an isolated in-memory SQLite database per test
    - Patches the engine getters to return the test engine
    - Patches get_session() to yield the test session
    - Rolls back the outer transaction on teardown

    Usage:
        def test_something(db_session):
            db_session.add(ExerciseCategory(name="Chest"))
            db_session.flush()
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragma)

    def mock_get_engine():
        return engine

    monkeypatch.setattr("app.db.session._get_engine", mock_get_engine)
    monkeypatch.setattr("app.db.session.get_engine", mock_get_engine)

    from app.db.models import Base

    Base.metadata.create_all(engine)

    connection = engine.connect()
    transaction = connection.begin()

    test_session_local = sessionmaker(bind=connection, autocommit=False, autoflush=False)
    session = test_session_local()

    @contextmanager
    def mock_get_session():
        yield session

    import app.db.session as session_module

    monkeypatch.setattr(session_module, "get_session", mock_get_session)

    try:
        yield session
    finally:
        session.rollback()
        if transaction.is_active:
            transaction.rollback()
        session.close()
        connection.close()


@pytest.fixture
def seeded_session(db_session):
    """db_session with the bundled seed catalog loaded."""
    from app.catalog.seed import load_seed_catalog, seed_database

    seed_database(db_session, load_seed_catalog(SEED_CATALOG_PATH))
    return db_session
