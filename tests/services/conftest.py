"""Service test fixtures — payload factories for stores and routes.

Invariants:
    - Factories return valid payloads; tests override only what they assert on
"""

import pytest

from taskflow.schemas.appointment import AppointmentCreate
from taskflow.schemas.task import TaskCreate


@pytest.fixture
def make_task():
    def _make(**overrides) -> TaskCreate:
        data = {
            "title": "Buy milk",
            "category": "Pessoal",
            "date": "2025-01-10",
            "time": "09:00",
        }
        data.update(overrides)
        return TaskCreate(**data)
    return _make


@pytest.fixture
def make_appointment():
    def _make(**overrides) -> AppointmentCreate:
        data = {
            "title": "Dentist",
            "date": "2025-01-10",
            "start_time": "14:00",
            "end_time": "15:00",
        }
        data.update(overrides)
        return AppointmentCreate(**data)
    return _make
