from __future__ import annotations

import sys
from datetime import date, datetime, time

from nutritrack.domain.entities import Workout
from nutritrack.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    initialize_database,
)
from nutritrack.infrastructure.repositories import WorkoutRepository
from scripts import run_reminders


def test_tomorrow_scan_replayed_at_given_time(settings, make_user, monkeypatch, capsys) -> None:
    user_id = make_user()
    engine = create_db_engine(settings)
    initialize_database(engine)
    with create_session_factory(engine)() as db:
        WorkoutRepository(db).create(
            Workout(
                id=None,
                user_id=user_id,
                name="Yoga",
                workout_date=date(2024, 6, 2),
                start_time=time(7, 0),
                created_at=datetime(2024, 5, 30, 12, 0),
            )
        )
    engine.dispose()

    monkeypatch.setattr(run_reminders, "get_settings", lambda: settings)
    monkeypatch.setattr(
        sys, "argv", ["run_reminders.py", "tomorrow", "--at", "2024-06-01T08:00:00"]
    )

    run_reminders.main()
    run_reminders.main()

    output = capsys.readouterr().out.splitlines()
    assert output == ["tomorrow: 1 notifications sent", "tomorrow: 0 notifications sent"]
