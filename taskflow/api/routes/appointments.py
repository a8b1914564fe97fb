"""Appointment Routes — REST CRUD, filtered listing, and search for appointments.

Invariants:
    - Same contract as task routes; no completed filter
    - /search is declared before /{appointment_id}
"""

from fastapi import APIRouter, Depends, Query, status

from taskflow.api.dependencies import (
    appointment_filters, get_appointment_store, get_category_store,
    require_category,
)
from taskflow.core.domain_types import AppointmentId
from taskflow.core.errors import ResourceNotFoundError
from taskflow.core.filters import AppointmentFilters
from taskflow.core.repository_protocols import (
    AppointmentRepository, CategoryRepository,
)
from taskflow.schemas.appointment import (
    AppointmentCreate, AppointmentResponse, AppointmentUpdate,
)

router = APIRouter(prefix="/api/appointments", tags=["appointments"])


@router.get("", response_model=list[AppointmentResponse])
async def list_appointments(
    filters: AppointmentFilters = Depends(appointment_filters),
    store: AppointmentRepository = Depends(get_appointment_store),
):
    appointments = await store.list(filters)
    return [AppointmentResponse.model_validate(a) for a in appointments]


@router.get("/search", response_model=list[AppointmentResponse])
async def search_appointments(
    q: str = Query(min_length=1, max_length=200),
    store: AppointmentRepository = Depends(get_appointment_store),
):
    appointments = await store.search(q)
    return [AppointmentResponse.model_validate(a) for a in appointments]


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    store: AppointmentRepository = Depends(get_appointment_store),
):
    appointment = await store.get(AppointmentId(appointment_id))
    if appointment is None:
        raise ResourceNotFoundError("Appointment", appointment_id)
    return AppointmentResponse.model_validate(appointment)


@router.post(
    "", response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_appointment(
    body: AppointmentCreate,
    store: AppointmentRepository = Depends(get_appointment_store),
    categories: CategoryRepository = Depends(get_category_store),
):
    await require_category(body.category_id, categories)
    appointment = await store.create(body)
    return AppointmentResponse.model_validate(appointment)


@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: int,
    body: AppointmentUpdate,
    store: AppointmentRepository = Depends(get_appointment_store),
    categories: CategoryRepository = Depends(get_category_store),
):
    await require_category(body.category_id, categories)
    appointment = await store.update(AppointmentId(appointment_id), body)
    if appointment is None:
        raise ResourceNotFoundError("Appointment", appointment_id)
    return AppointmentResponse.model_validate(appointment)


@router.delete("/{appointment_id}")
async def delete_appointment(
    appointment_id: int,
    store: AppointmentRepository = Depends(get_appointment_store),
):
    if not await store.delete(AppointmentId(appointment_id)):
        raise ResourceNotFoundError("Appointment", appointment_id)
    return {"success": True}
