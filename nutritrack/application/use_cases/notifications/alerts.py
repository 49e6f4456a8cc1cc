"""Alert identities and user-facing texts."""

from __future__ import annotations

from nutritrack.domain.entities import AlertKind, CooldownKey, Goal, Workout


def goal_completed(goal: Goal) -> tuple[CooldownKey, str]:
    key = CooldownKey(goal.user_id, goal.id, AlertKind.GOAL_COMPLETED)
    return key, f"🎯 Congratulations! Your goal '{goal.goal_type}' is completed."


def goal_near_completion(goal: Goal) -> tuple[CooldownKey, str]:
    key = CooldownKey(goal.user_id, goal.id, AlertKind.GOAL_NEAR_COMPLETION)
    return key, f"💪 You're close! Your goal '{goal.goal_type}' is 80% complete."


def goal_overdue(goal: Goal, days: int) -> tuple[CooldownKey, str]:
    key = CooldownKey(goal.user_id, goal.id, AlertKind.GOAL_OVERDUE)
    return (
        key,
        f"⏰ Reminder: You have not updated your goal '{goal.goal_type}' for {days} days.",
    )


def workout_scheduled(workout: Workout) -> tuple[CooldownKey, str]:
    key = CooldownKey(workout.user_id, workout.id, AlertKind.WORKOUT_SCHEDULED)
    return key, f"💪 New workout scheduled: {workout.name}"


def workout_updated(workout: Workout) -> tuple[CooldownKey, str]:
    key = CooldownKey(workout.user_id, workout.id, AlertKind.WORKOUT_UPDATED)
    return key, f"✏️ Your workout '{workout.name}' was updated."


def workout_tomorrow(workout: Workout) -> tuple[CooldownKey, str]:
    # The date is part of the identity so a rescheduled workout is reminded again.
    key = CooldownKey(
        workout.user_id,
        workout.id,
        AlertKind.WORKOUT_TOMORROW,
        workout.workout_date.isoformat(),
    )
    return key, f"⏰ Reminder: Your workout '{workout.name}' is scheduled for tomorrow."


def workout_same_day(workout: Workout) -> tuple[CooldownKey, str]:
    if workout.start_time is None:
        raise ValueError("Same-day reminders need a start time")
    starts = workout.start_time.strftime("%H:%M")
    key = CooldownKey(workout.user_id, workout.id, AlertKind.WORKOUT_SAME_DAY, starts)
    return key, f"⏰ Get ready! Your workout '{workout.name}' starts at {starts}"


__all__ = [
    "goal_completed",
    "goal_near_completion",
    "goal_overdue",
    "workout_same_day",
    "workout_scheduled",
    "workout_tomorrow",
    "workout_updated",
]
