"""Run one reminder scan immediately, outside the API process."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from nutritrack.application.use_cases.notifications import (
    NotificationPolicy,
    Notifier,
    fixed_clock,
    run_overdue_goal_reminders,
    run_same_day_workout_reminders,
    run_tomorrow_workout_reminders,
)
from nutritrack.config import get_settings
from nutritrack.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    initialize_database,
)
from nutritrack.utils import ensure_naive_in_timezone, resolve_timezone

SCANS = {
    "tomorrow": run_tomorrow_workout_reminders,
    "same-day": run_same_day_workout_reminders,
    "overdue-goals": run_overdue_goal_reminders,
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a NutriTrack reminder scan once and report how many alerts were sent.",
    )
    parser.add_argument(
        "scan",
        choices=sorted(SCANS),
        help="Which reminder scan to run",
    )
    parser.add_argument(
        "--at",
        type=datetime.fromisoformat,
        default=None,
        help="Run the scan as of this ISO datetime (replays a missed run)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    clock = None
    if args.at is not None:
        moment = ensure_naive_in_timezone(args.at, resolve_timezone(settings.app_timezone))
        clock = fixed_clock(moment)

    engine = create_db_engine(settings)
    try:
        initialize_database(engine)
        notifier = Notifier(NotificationPolicy.from_settings(settings, clock=clock))
        sent = SCANS[args.scan](create_session_factory(engine), notifier)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Reminder scan failed: {exc}") from exc
    finally:
        engine.dispose()
    print(f"{args.scan}: {sent} notifications sent")


if __name__ == "__main__":
    main()
