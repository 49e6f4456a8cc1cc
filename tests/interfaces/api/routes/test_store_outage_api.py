"""Saves keep working while the notification table is unavailable."""

from __future__ import annotations

import pytest

from nutritrack.infrastructure.models import NotificationModel


@pytest.fixture
def broken_store(client):
    NotificationModel.__table__.drop(bind=client.app.state.engine)


def test_completed_goal_is_saved(client, auth_headers, broken_store) -> None:
    response = client.post(
        "/goals",
        json={
            "goal_type": "steps",
            "target_value": 10,
            "progress_value": 10,
            "time_frame": "daily",
        },
        headers=auth_headers,
    )

    assert response.status_code == 201, response.text
    assert response.json()["is_completed"] is True


def test_workout_is_saved_and_updated(client, auth_headers, broken_store) -> None:
    created = client.post(
        "/user/workouts",
        json={"name": "Run", "date": "2024-05-15", "start_time": "18:00"},
        headers=auth_headers,
    )
    assert created.status_code == 201, created.text

    updated = client.put(
        f"/user/workouts/{created.json()['id']}",
        json={"name": "Long run", "date": "2024-05-15"},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "Long run"
