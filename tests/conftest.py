"""Shared fixtures: isolated SQLite databases, a controllable clock and users."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timedelta
from pathlib import Path
from uuid import UUID

import pytest

# ``main`` builds an application at import time from the environment.
os.environ.setdefault(
    "DATABASE_URL", f"sqlite:///{Path(tempfile.gettempdir()) / 'nutritrack_import.db'}"
)
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("SCHEDULER_ENABLED", "false")

from nutritrack.application.use_cases.notifications import (  # noqa: E402
    NotificationPolicy,
    Notifier,
)
from nutritrack.config import Settings, reset_settings_cache  # noqa: E402
from nutritrack.domain.entities import User  # noqa: E402
from nutritrack.infrastructure.database import (  # noqa: E402
    Base,
    create_db_engine,
    create_session_factory,
    initialize_database,
)
from nutritrack.infrastructure.repositories import UserRepository  # noqa: E402
from nutritrack.infrastructure.security import get_password_hash  # noqa: E402

START = datetime(2024, 5, 14, 10, 0, 0)


class FakeClock:
    """Callable clock returning a settable naive datetime."""

    def __init__(self, current: datetime) -> None:
        self.current = current

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta: float) -> datetime:
        self.current += timedelta(**delta)
        return self.current


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'nutritrack_test.db'}",
        secret_key="test-secret",
        scheduler_enabled=False,
        app_timezone="UTC",
    )


@pytest.fixture
def engine(settings: Settings):
    engine = create_db_engine(settings)
    initialize_database(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(START)


@pytest.fixture
def notifier(settings: Settings, clock: FakeClock) -> Notifier:
    return Notifier(NotificationPolicy.from_settings(settings, clock=clock))


@pytest.fixture
def make_user(session_factory):
    counter = {"value": 0}

    def _make_user(email: str | None = None, password: str = "StrongPass123") -> UUID:
        counter["value"] += 1
        email = email or f"user{counter['value']}@example.com"
        with session_factory() as db:
            user = UserRepository(db).create(
                User(
                    id=None,
                    email=email,
                    password=get_password_hash(password),
                    name=f"User {counter['value']}",
                    created_at=START,
                )
            )
        return user.id

    return _make_user
