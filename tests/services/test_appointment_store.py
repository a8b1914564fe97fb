"""Appointment Store — same contract as tasks, without the completed flag."""

from taskflow.core.domain_types import SortBy, SortOrder
from taskflow.core.filters import AppointmentFilters
from taskflow.schemas.appointment import AppointmentUpdate
from taskflow.services.appointment_store import AppointmentStore


async def test_create_and_get_round_trip(test_db, make_appointment):
    store = AppointmentStore(test_db)
    payload = make_appointment(location="Clinic", category="Saúde")
    created = await store.create(payload)

    fetched = await store.get(created.id)
    assert fetched.location == "Clinic"
    assert fetched.start_time == "14:00"
    assert fetched.end_time == "15:00"
    assert fetched.priority == "medium"
    assert fetched.reminder_enabled is False


async def test_update_changes_only_given_field(test_db, make_appointment):
    store = AppointmentStore(test_db)
    created = await store.create(make_appointment(location="Clinic"))

    updated = await store.update(created.id, AppointmentUpdate(end_time="16:00"))
    assert updated.end_time == "16:00"
    assert updated.start_time == "14:00"
    assert updated.location == "Clinic"
    assert updated.title == "Dentist"


async def test_update_and_delete_missing(test_db):
    store = AppointmentStore(test_db)
    assert await store.update(9999, AppointmentUpdate(title="x")) is None
    assert await store.delete(9999) is False


async def test_list_filters_by_category_and_date_range(test_db, make_appointment):
    store = AppointmentStore(test_db)
    await store.create(make_appointment(category="Trabalho", date="2025-01-05"))
    hit = await store.create(make_appointment(category="Trabalho", date="2025-01-10"))
    await store.create(make_appointment(category="Pessoal", date="2025-01-10"))

    found = await store.list(AppointmentFilters(
        category="Trabalho", date_from="2025-01-06",
    ))
    assert [a.id for a in found] == [hit.id]


async def test_list_sorted_by_date_ascending(test_db, make_appointment):
    store = AppointmentStore(test_db)
    for day in ("2025-03-01", "2025-01-01", "2025-02-01"):
        await store.create(make_appointment(date=day))

    found = await store.list(
        AppointmentFilters(sort_by=SortBy.DATE, sort_order=SortOrder.ASC),
    )
    assert [a.date for a in found] == ["2025-01-01", "2025-02-01", "2025-03-01"]


async def test_search_skips_null_description_and_category(test_db, make_appointment):
    store = AppointmentStore(test_db)
    hit = await store.create(make_appointment(title="Lunch meeting"))
    await store.create(make_appointment(title="Standup"))

    found = await store.search("LUNCH")
    assert [a.id for a in found] == [hit.id]
