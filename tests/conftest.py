# /tests/conftest.py

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lms.core.security import create_access_token
from lms.db.base import Base
from lms.db.database import get_db
from lms.main import app
from lms.services.database_service import DatabaseService

# --- Database Fixtures ---

@pytest.fixture
def session():
    """
    A session on a private in-memory SQLite database with the full schema.
    Each test gets a brand-new database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_service(session):
    return DatabaseService(db_session=session)


@pytest.fixture
def client(session):
    """A TestClient whose requests share the test's session."""
    def _override_get_db():
        yield session

    app.dependency_overrides[get_db] = _override_get_db
    # Not used as a context manager, so the lifespan (and its create_all
    # against the configured DATABASE_URL) does not run.
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()

# --- Record Factories ---

@pytest.fixture
def make_user(db_service):
    def _make(role="student", name=None, email=None):
        user_id = f"usr_{uuid.uuid4().hex[:12]}"
        return db_service.add_user({
            "id": user_id,
            "name": name or f"{role.title()} {user_id[-4:]}",
            "email": email or f"{user_id}@example.com",
            "password": "not-a-real-hash",
            "role": role,
        })
    return _make


@pytest.fixture
def make_course(db_service):
    def _make(teacher_id, title="Intro to Testing"):
        return db_service.add_course({
            "id": f"crs_{uuid.uuid4().hex[:12]}",
            "title": title,
            "description": "",
            "teacher_id": teacher_id,
        })
    return _make


@pytest.fixture
def make_lectures(db_service):
    def _make(course_id, count):
        return [
            db_service.add_lecture({
                "id": f"lec_{uuid.uuid4().hex[:12]}",
                "course_id": course_id,
                "title": f"Lecture {i + 1}",
                "video_url": f"https://videos.example.com/{i + 1}.mp4",
                "order": i + 1,
            })
            for i in range(count)
        ]
    return _make


@pytest.fixture
def watch(db_service):
    """Records a watch-time row for each given lecture."""
    def _watch(student_id, lectures, position=30.0):
        for lecture in lectures:
            db_service.upsert_watch_time({
                "id": f"wt_{uuid.uuid4().hex[:12]}",
                "student_id": student_id,
                "lecture_id": lecture.id,
                "current_time": position,
            })
    return _watch

# --- Auth Helpers ---

@pytest.fixture
def auth_headers():
    def _headers(user_id, role):
        return {"Authorization": f"Bearer {create_access_token(user_id, role)}"}
    return _headers
