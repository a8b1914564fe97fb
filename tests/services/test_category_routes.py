"""Category Routes — HTTP contract for /api/categories.

Invariants:
    - Deleting a category keeps its tasks and appointments, with categoryId nulled
    - A categoryId that names no category is a 400 and writes nothing
"""


async def test_create_list_update_delete(http_client):
    res = await http_client.post(
        "/api/categories", json={"name": "Casa", "color": "#22c55e"},
    )
    assert res.status_code == 201
    created = res.json()
    assert created["isDefault"] is False
    assert created["icon"] == "tag"

    res = await http_client.get("/api/categories")
    assert [c["name"] for c in res.json()] == ["Casa"]

    path = f"/api/categories/{created['id']}"
    res = await http_client.patch(path, json={"icon": "home"})
    assert res.json()["icon"] == "home"
    assert res.json()["color"] == "#22c55e"

    assert (await http_client.delete(path)).json() == {"success": True}
    assert (await http_client.get(path)).status_code == 404


async def test_blank_name_is_rejected(http_client):
    res = await http_client.post("/api/categories", json={"name": " "})
    assert res.status_code == 400


async def test_missing_category_returns_404(http_client):
    res = await http_client.patch("/api/categories/5", json={"name": "x"})
    assert res.status_code == 404
    assert res.json()["error"]["context"]["entity"] == "Category"


async def test_delete_nulls_category_id_on_dependents(http_client):
    """Tasks and appointments survive their category's deletion, unlinked."""
    category = (await http_client.post(
        "/api/categories", json={"name": "Casa"},
    )).json()
    task = (await http_client.post("/api/tasks", json={
        "title": "Fix sink", "category": "Casa", "categoryId": category["id"],
        "date": "2025-01-10", "time": "09:00",
    })).json()
    appointment = (await http_client.post("/api/appointments", json={
        "title": "Plumber", "categoryId": category["id"],
        "date": "2025-01-10", "startTime": "10:00", "endTime": "11:00",
    })).json()
    assert task["categoryId"] == category["id"]

    res = await http_client.delete(f"/api/categories/{category['id']}")
    assert res.status_code == 200

    res = await http_client.get(f"/api/tasks/{task['id']}")
    assert res.status_code == 200
    assert res.json()["categoryId"] is None
    assert res.json()["category"] == "Casa"

    res = await http_client.get(f"/api/appointments/{appointment['id']}")
    assert res.status_code == 200
    assert res.json()["categoryId"] is None


async def test_unknown_category_id_is_rejected(http_client):
    res = await http_client.post("/api/tasks", json={
        "title": "Orphan", "category": "Casa", "categoryId": 4242,
        "date": "2025-01-10", "time": "09:00",
    })
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["context"] == {"entity": "Category", "entity_id": 4242}
    assert (await http_client.get("/api/tasks")).json() == []


async def test_unknown_category_id_rejected_on_update(http_client):
    task = (await http_client.post("/api/tasks", json={
        "title": "Fix sink", "category": "Casa",
        "date": "2025-01-10", "time": "09:00",
    })).json()

    res = await http_client.patch(
        f"/api/tasks/{task['id']}", json={"categoryId": 4242},
    )
    assert res.status_code == 400

    res = await http_client.patch(
        "/api/appointments/1", json={"categoryId": 4242},
    )
    assert res.status_code == 400
