"""Appointment Routes — HTTP contract for /api/appointments."""


def _appointment_body(**overrides) -> dict:
    body = {
        "title": "Dentist",
        "date": "2025-01-10",
        "startTime": "14:00",
        "endTime": "15:00",
    }
    body.update(overrides)
    return body


async def test_create_and_get(http_client):
    res = await http_client.post(
        "/api/appointments", json=_appointment_body(location="Clinic"),
    )
    assert res.status_code == 201
    created = res.json()
    assert created["startTime"] == "14:00"
    assert created["location"] == "Clinic"
    assert created["category"] is None
    assert "completed" not in created

    res = await http_client.get(f"/api/appointments/{created['id']}")
    assert res.status_code == 200
    assert res.json()["title"] == "Dentist"


async def test_invalid_time_is_rejected(http_client):
    res = await http_client.post(
        "/api/appointments", json=_appointment_body(startTime="25:00"),
    )
    assert res.status_code == 400


async def test_patch_and_delete(http_client):
    created = (await http_client.post(
        "/api/appointments", json=_appointment_body(),
    )).json()
    path = f"/api/appointments/{created['id']}"

    res = await http_client.patch(path, json={"endTime": "16:30"})
    assert res.json()["endTime"] == "16:30"
    assert res.json()["startTime"] == "14:00"

    assert (await http_client.delete(path)).json() == {"success": True}
    assert (await http_client.get(path)).status_code == 404


async def test_missing_appointment_returns_404(http_client):
    assert (await http_client.get("/api/appointments/77")).status_code == 404
    res = await http_client.patch("/api/appointments/77", json={"title": "x"})
    assert res.status_code == 404
    assert (await http_client.delete("/api/appointments/77")).status_code == 404


async def test_list_and_search(http_client):
    await http_client.post("/api/appointments", json=_appointment_body(
        title="Team lunch", date="2025-01-12",
    ))
    await http_client.post("/api/appointments", json=_appointment_body(
        title="Checkup", date="2025-01-11",
    ))

    res = await http_client.get(
        "/api/appointments", params={"sortBy": "date", "sortOrder": "asc"},
    )
    assert [a["title"] for a in res.json()] == ["Checkup", "Team lunch"]

    res = await http_client.get("/api/appointments/search", params={"q": "lunch"})
    assert [a["title"] for a in res.json()] == ["Team lunch"]
