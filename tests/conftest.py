"""Shared fixtures: in-memory SQLite store wired into the FastAPI app."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from experience_board.api.dependencies import get_store
from experience_board.core.config import Settings, get_settings
from experience_board.db.postgres import init_schema
from experience_board.db.store import ExperienceStore
from experience_board.main import create_app

ADMIN_SECRET = "test-admin-secret"
CRON_SECRET = "test-cron-secret"

BASE_TIME = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def valid_submission(**overrides):
    """A submission payload that passes validation."""
    payload = {
        "student_name": "Jane Doe",
        "linkedin_url": "https://www.linkedin.com/in/janedoe",
        "company": "Acme Corp",
        "position": "Software Engineer Intern",
        "interview_dates": [
            {"label": "Applied", "date": "2026-09-01"},
            {"label": "Onsite", "date": "2026-09-20"},
        ],
        "phone_screens": 1,
        "technical_interviews": 2,
        "behavioral_interviews": 1,
        "other_interviews": 0,
        "interview_questions": "Reverse a linked list and explain its complexity.",
        "advice_tips": "Practice talking through your approach out loud.",
        "is_anonymous": False,
        "consent_given": True,
    }
    payload.update(overrides)
    return payload


def admin_headers(secret=ADMIN_SECRET):
    return {"Authorization": f"Bearer {secret}"}


@pytest.fixture
def settings():
    """Test settings; no .env file is read."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        admin_password=ADMIN_SECRET,
        cron_secret=CRON_SECRET,
        health_recent_window_days=7,
        retention_days=365,
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return ExperienceStore(engine)


@pytest.fixture
def add_experience(store):
    """
    Factory inserting a record directly through the store.
    Records are spaced one minute apart so ordering is deterministic.
    """
    counter = {"n": 0}

    def _add(status="pending", **overrides):
        counter["n"] += 1
        data = valid_submission(**overrides)
        data.pop("consent_given")
        record = store.create(data, now=BASE_TIME + timedelta(minutes=counter["n"]))
        if status != "pending":
            record = store.update(record["id"], {"status": status})
        return record

    return _add


@pytest.fixture
def app(settings, store):
    app = create_app(settings)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Test client. Startup events are not run, so no real database is opened."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def make_payload():
    """Factory for valid submission payloads with overrides."""
    return valid_submission


@pytest.fixture
def auth():
    """Admin Authorization header."""
    return admin_headers()


@pytest.fixture
def cron_auth():
    return {"Authorization": f"Bearer {CRON_SECRET}"}
