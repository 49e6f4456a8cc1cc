"""Notification emission, reminder scans and inbox management."""

from .evaluators import evaluate_goal_thresholds, is_goal_completed, notify_workout_saved
from .manage import (
    clear_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .notifier import NotificationStoreError, Notifier
from .policy import Clock, NotificationPolicy, fixed_clock
from .reminders import (
    SessionFactory,
    build_reminder_jobs,
    run_overdue_goal_reminders,
    run_same_day_workout_reminders,
    run_tomorrow_workout_reminders,
)

__all__ = [
    "Clock",
    "NotificationPolicy",
    "NotificationStoreError",
    "Notifier",
    "SessionFactory",
    "build_reminder_jobs",
    "clear_notifications",
    "delete_notification",
    "evaluate_goal_thresholds",
    "fixed_clock",
    "is_goal_completed",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_workout_saved",
    "run_overdue_goal_reminders",
    "run_same_day_workout_reminders",
    "run_tomorrow_workout_reminders",
]
