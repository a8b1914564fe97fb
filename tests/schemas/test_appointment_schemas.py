"""Appointment and Category Schemas — required fields and null handling."""

import pytest
from pydantic import ValidationError

from taskflow.schemas.appointment import AppointmentCreate, AppointmentUpdate
from taskflow.schemas.category import CategoryCreate, CategoryUpdate

BASE = {
    "title": "Dentist", "date": "2025-01-10",
    "startTime": "14:00", "endTime": "15:00",
}


def test_category_is_optional():
    appointment = AppointmentCreate(**BASE)
    assert appointment.category is None
    assert appointment.start_time == "14:00"


@pytest.mark.parametrize("field, value", [
    ("title", " "),
    ("startTime", "2pm"),
    ("endTime", "15:75"),
    ("priority", "critical"),
    ("date", "2025-04-31"),
])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        AppointmentCreate(**{**BASE, field: value})


def test_update_rejects_null_end_time():
    with pytest.raises(ValidationError):
        AppointmentUpdate(endTime=None)


def test_update_allows_null_location():
    assert AppointmentUpdate(location=None).model_dump(exclude_unset=True) == {
        "location": None,
    }


def test_category_defaults_and_blank_name():
    category = CategoryCreate(name=" Casa ")
    assert category.name == "Casa"
    assert category.color == "#6366f1"
    with pytest.raises(ValidationError):
        CategoryCreate(name="  ")
    with pytest.raises(ValidationError):
        CategoryUpdate(name=None)
