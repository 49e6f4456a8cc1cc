"""HTTP behaviour of the notification inbox."""

from __future__ import annotations

from uuid import uuid4


def _schedule(client, headers, name: str, day: str = "2024-05-20"):
    response = client.post(
        "/user/workouts",
        json={"name": name, "date": day, "duration_min": 30, "start_time": "18:00"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_inbox_requires_authentication(client) -> None:
    assert client.get("/notifications").status_code == 401


def test_new_workout_creates_notification(client, auth_headers) -> None:
    workout = _schedule(client, auth_headers, "Leg day")

    response = client.get("/notifications", headers=auth_headers)

    assert response.status_code == 200
    (notification,) = response.json()
    assert notification["message"] == "💪 New workout scheduled: Leg day"
    assert notification["kind"] == "workout_scheduled"
    assert notification["related_id"] == workout["id"]
    assert notification["is_read"] is False


def test_pagination_is_clamped(client, auth_headers, clock) -> None:
    for index in range(12):
        clock.advance(minutes=1)
        _schedule(client, auth_headers, f"Workout {index}")

    default_page = client.get("/notifications", headers=auth_headers).json()
    assert len(default_page) == 10
    assert default_page[0]["message"].endswith("Workout 11")

    assert len(client.get("/notifications?limit=0", headers=auth_headers).json()) == 10
    assert len(client.get("/notifications?limit=abc", headers=auth_headers).json()) == 10
    assert len(client.get("/notifications?limit=500", headers=auth_headers).json()) == 12

    tail = client.get("/notifications?limit=5&offset=10", headers=auth_headers).json()
    assert [item["message"].split(": ")[-1] for item in tail] == ["Workout 1", "Workout 0"]
    negative = client.get("/notifications?offset=-4", headers=auth_headers).json()
    assert negative == default_page


def test_read_flow(client, auth_headers) -> None:
    _schedule(client, auth_headers, "A")
    _schedule(client, auth_headers, "B")
    first = client.get("/notifications", headers=auth_headers).json()[0]

    response = client.put(f"/notifications/{first['id']}/read", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Notification marked as read"}

    again = client.put(f"/notifications/{first['id']}/read", headers=auth_headers)
    assert again.status_code == 404

    unread = client.get("/notifications?is_read=false", headers=auth_headers).json()
    read = client.get("/notifications?is_read=true", headers=auth_headers).json()
    assert [item["id"] for item in read] == [first["id"]]
    assert len(unread) == 1

    everything = client.put("/notifications/read-all", headers=auth_headers)
    assert everything.json() == {
        "message": "All notifications marked as read",
        "updated_notifications": 1,
    }
    assert client.get("/notifications?is_read=false", headers=auth_headers).json() == []


def test_delete_and_clear(client, auth_headers) -> None:
    for name in ("A", "B", "C"):
        _schedule(client, auth_headers, name)
    target = client.get("/notifications", headers=auth_headers).json()[0]

    deleted = client.delete(f"/notifications/{target['id']}", headers=auth_headers)
    assert deleted.status_code == 200
    assert client.delete(f"/notifications/{target['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/notifications/{uuid4()}", headers=auth_headers).status_code == 404

    cleared = client.delete("/notifications/clear-all", headers=auth_headers)
    assert cleared.json() == {"message": "All notifications cleared", "deleted_notifications": 2}
    assert client.get("/notifications", headers=auth_headers).json() == []


def test_users_cannot_touch_each_other(client, register) -> None:
    owner = register("owner@example.com")
    other = register("other@example.com")
    _schedule(client, owner, "Private")
    notification = client.get("/notifications", headers=owner).json()[0]

    assert client.get("/notifications", headers=other).json() == []
    assert client.put(f"/notifications/{notification['id']}/read", headers=other).status_code == 404
    assert client.delete(f"/notifications/{notification['id']}", headers=other).status_code == 404
    assert client.delete("/notifications/clear-all", headers=other).json()[
        "deleted_notifications"
    ] == 0
    assert len(client.get("/notifications", headers=owner).json()) == 1
