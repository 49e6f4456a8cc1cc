from __future__ import annotations

from uuid import uuid4

import pytest


def _kinds(client, headers) -> list[str]:
    return sorted(item["kind"] for item in client.get("/notifications", headers=headers).json())


def test_workout_lifecycle(client, auth_headers) -> None:
    created = client.post(
        "/user/workouts",
        json={
            "name": "  Morning run ",
            "date": "2024-05-15",
            "duration_min": 45,
            "calories_burned": 400,
            "start_time": "07:30:00",
            "workout_type": "cardio",
        },
        headers=auth_headers,
    )
    assert created.status_code == 201, created.text
    workout = created.json()
    assert workout["name"] == "Morning run"
    assert workout["start_time"] == "07:30"
    assert workout["date"] == "2024-05-15"

    updated = client.put(
        f"/user/workouts/{workout['id']}",
        json={"name": "Evening run", "date": "2024-05-15", "duration_min": 30},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["start_time"] is None
    assert _kinds(client, auth_headers) == ["workout_scheduled", "workout_updated"]

    listed = client.get("/user/workouts", headers=auth_headers).json()
    assert [item["name"] for item in listed] == ["Evening run"]

    assert client.delete(f"/user/workouts/{workout['id']}", headers=auth_headers).status_code == 200
    assert client.delete(f"/user/workouts/{workout['id']}", headers=auth_headers).status_code == 404


def test_repeated_updates_are_cooled_down(client, auth_headers, clock) -> None:
    workout = client.post(
        "/user/workouts", json={"name": "Swim", "date": "2024-05-15"}, headers=auth_headers
    ).json()
    body = {"name": "Swim", "date": "2024-05-16"}

    for _ in range(3):
        client.put(f"/user/workouts/{workout['id']}", json=body, headers=auth_headers)
    assert _kinds(client, auth_headers) == ["workout_scheduled", "workout_updated"]

    clock.advance(hours=24, seconds=1)
    client.put(f"/user/workouts/{workout['id']}", json=body, headers=auth_headers)
    assert _kinds(client, auth_headers) == [
        "workout_scheduled",
        "workout_updated",
        "workout_updated",
    ]


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "date": "2024-05-15"},
        {"name": "Run", "date": "15/05/2024"},
        {"name": "Run", "date": "2024-05-15", "duration_min": -1},
        {"name": "Run", "date": "2024-05-15", "start_time": "7pm"},
    ],
)
def test_invalid_workouts_are_rejected(client, auth_headers, payload) -> None:
    response = client.post("/user/workouts", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert client.get("/notifications", headers=auth_headers).json() == []


def test_updating_missing_workout_returns_404(client, auth_headers) -> None:
    response = client.put(
        f"/user/workouts/{uuid4()}",
        json={"name": "Run", "date": "2024-05-15"},
        headers=auth_headers,
    )

    assert response.status_code == 404


def test_goal_save_creates_then_updates(client, auth_headers) -> None:
    body = {"goal_type": "Steps", "target_value": 10, "time_frame": "daily", "progress_value": 3}

    created = client.post("/goals", json=body, headers=auth_headers)
    assert created.status_code == 201
    assert created.json()["goal_type"] == "steps"

    body["progress_value"] = 8
    updated = client.post("/goals", json=body, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()["id"] == created.json()["id"]
    assert _kinds(client, auth_headers) == ["goal_near_completion"]

    goal_id = created.json()["id"]
    done = client.put(
        f"/goals/{goal_id}",
        json={"target_value": 10, "time_frame": "daily", "progress_value": 10},
        headers=auth_headers,
    )
    assert done.json()["is_completed"] is True
    assert _kinds(client, auth_headers) == ["goal_completed", "goal_near_completion"]


def test_goal_archive_and_restore(client, auth_headers) -> None:
    goal = client.post(
        "/goals",
        json={"goal_type": "water", "target_value": 8, "time_frame": "daily"},
        headers=auth_headers,
    ).json()

    assert client.delete(f"/goals/{goal['id']}", headers=auth_headers).status_code == 200
    assert client.delete(f"/goals/{goal['id']}", headers=auth_headers).status_code == 404
    assert client.get("/goals", headers=auth_headers).json() == []
    archived = client.get("/goals?include_archived=true", headers=auth_headers).json()
    assert [item["archived"] for item in archived] == [True]

    assert client.put(f"/goals/{goal['id']}/restore", headers=auth_headers).status_code == 200
    assert client.put(f"/goals/{goal['id']}/restore", headers=auth_headers).status_code == 404
    assert len(client.get("/goals", headers=auth_headers).json()) == 1


def test_goal_listing_filters_and_sorts(client, auth_headers) -> None:
    for goal_type, progress in (("steps", 10), ("water", 1), ("sleep", 2)):
        client.post(
            "/goals",
            json={
                "goal_type": goal_type,
                "target_value": 10,
                "time_frame": "weekly",
                "progress_value": progress,
            },
            headers=auth_headers,
        )

    completed = client.get("/goals?completed=true", headers=auth_headers).json()
    assert [item["goal_type"] for item in completed] == ["steps"]

    by_progress = client.get(
        "/goals?sort_by=progress_value&order=asc&limit=2", headers=auth_headers
    ).json()
    assert [item["goal_type"] for item in by_progress] == ["water", "sleep"]


@pytest.mark.parametrize(
    "payload",
    [
        {"goal_type": "x", "target_value": 10, "time_frame": "daily"},
        {"goal_type": "steps", "target_value": 0, "time_frame": "daily"},
        {"goal_type": "steps", "target_value": 10, "time_frame": "yearly"},
    ],
)
def test_invalid_goals_return_400(client, auth_headers, payload) -> None:
    assert client.post("/goals", json=payload, headers=auth_headers).status_code == 400
