"""Pytest fixtures for RoomHub tests.

Uses a SQLite test database and FastAPI TestClient. Overrides the
`get_db` dependency so tests are isolated from any real DB file.
"""

import os
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

import roomhub.database as database
from roomhub.main import app
from roomhub.models import Base, QuestionModel, RoomModel


TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test_roomhub.db")

# Create test engine and session factory
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})


# SQLite leaves foreign keys unenforced unless asked on every connection
@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture(autouse=True)
def setup_database(monkeypatch):
    """Create tables before each test and drop them after to ensure isolation."""
    # Lifespan startup calls init_db(); keep it away from the real DB file
    monkeypatch.setattr(database, "engine", engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def test_engine():
    """The engine behind the test database."""
    return engine


@pytest.fixture()
def db_session():
    """Provide a SQLAlchemy session for direct DB access in tests."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


# Override get_db dependency in the app
def _override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[database.get_db] = _override_get_db

# Many requests per test run come from the same client address
app.state.limiter.enabled = False


@pytest.fixture()
def client():
    """FastAPI test client using the app with overridden dependencies."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def create_room(db_session):
    """Insert a room with `questions` question rows directly in the DB."""
    def _create_room(name: str = "Room", questions: int = 0, created_at: datetime | None = None, description: str | None = None):
        room = RoomModel(
            name=name,
            description=description,
            created_at=created_at or datetime.now(timezone.utc),
        )
        db_session.add(room)
        db_session.flush()
        for idx in range(questions):
            db_session.add(QuestionModel(room_id=room.id, question=f"Question {idx + 1}?"))
        db_session.commit()
        db_session.refresh(room)
        return room

    return _create_room
