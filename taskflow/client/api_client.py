"""TaskFlow API Client — httpx wrapper with cached reads and invalidate-then-refetch writes.

Invariants:
    - Lists are fetched once per QueryKey and served from cache until invalidated
    - get_* returns None on 404 (absent value), other failures raise ApiRequestError
    - A successful write invalidates the owning list tag; update/delete also
      invalidate the item tag. A failed write raises and leaves the cache untouched.
    - Deleting a category also invalidates every cached task and appointment,
      list or item, since the server nulls their categoryId
    - No retries: every failure is terminal for the triggering call

Design Decisions:
    - Wraps an injected httpx.AsyncClient: tests pass one bound to the ASGI app,
      production uses connect(); cookies persist on the httpx client
    - Responses parsed into the same pydantic models the server emits
"""

import logging
from datetime import date
from typing import Any

import httpx
from pydantic import BaseModel

from taskflow.client.agenda import Agenda, build_agenda
from taskflow.client.query_cache import QueryCache, QueryKey
from taskflow.core.errors import ApiRequestError
from taskflow.core.filters import AppointmentFilters, EntityFilters, TaskFilters
from taskflow.schemas.appointment import (
    AppointmentCreate, AppointmentResponse, AppointmentUpdate,
)
from taskflow.schemas.category import (
    CategoryCreate, CategoryResponse, CategoryUpdate,
)
from taskflow.schemas.task import TaskCreate, TaskResponse, TaskUpdate

logger = logging.getLogger(__name__)

TASKS = "/api/tasks"
APPOINTMENTS = "/api/appointments"
CATEGORIES = "/api/categories"


def items_tag(path: str) -> str:
    """Tag carried by every cached single item under path."""
    return f"{path}/*"


def filters_to_params(filters: EntityFilters | None) -> dict[str, Any]:
    """Translate a filter set into camelCase query params (None values dropped)."""
    if filters is None:
        return {}
    params = {
        "category": filters.category,
        "priority": filters.priority,
        "dateFrom": filters.date_from,
        "dateTo": filters.date_to,
        "tags": list(filters.tags) or None,
        "sortBy": filters.sort_by.value if filters.sort_by else None,
        "sortOrder": filters.sort_order.value if filters.sort_order else None,
    }
    if isinstance(filters, TaskFilters) and filters.completed is not None:
        params["completed"] = "true" if filters.completed else "false"
    return {k: v for k, v in params.items() if v is not None}


def _body(payload: BaseModel | dict, partial: bool = False) -> dict:
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, exclude_unset=partial, mode="json")
    return payload


def _server_error_code(response: httpx.Response) -> str | None:
    try:
        return response.json().get("error", {}).get("code")
    except (ValueError, AttributeError):
        return None


class TaskFlowClient:
    """Async client for the TaskFlow REST API."""

    def __init__(self, http: httpx.AsyncClient, cache: QueryCache | None = None):
        self.http = http
        self.cache = cache if cache is not None else QueryCache()

    @classmethod
    def connect(cls, base_url: str, **httpx_kwargs) -> "TaskFlowClient":
        return cls(httpx.AsyncClient(base_url=base_url, **httpx_kwargs))

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "TaskFlowClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ─── Transport ──────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict | None = None,
        params: dict | None = None,
        allow_not_found: bool = False,
    ) -> httpx.Response | None:
        response = await self.http.request(method, path, json=json, params=params)
        if response.is_success:
            return response
        if allow_not_found and response.status_code == 404:
            return None
        error = ApiRequestError(
            method, path, response.status_code, _server_error_code(response),
        )
        logger.warning(
            error.message,
            extra={"error_code": error.server_code, "path": path},
        )
        raise error

    async def _cached_list(
        self, path: str, model, params: dict, tag: str | None = None,
    ) -> list:
        async def load():
            response = await self._request("GET", path, params=params)
            return [model.model_validate(item) for item in response.json()]

        return await self.cache.fetch(
            QueryKey.of(path, params), load, tags=[tag or path],
        )

    async def _cached_item(self, path: str, item_id: int, model):
        item_path = f"{path}/{item_id}"

        async def load():
            response = await self._request("GET", item_path, allow_not_found=True)
            if response is None:
                return None
            return model.model_validate(response.json())

        return await self.cache.fetch(
            QueryKey.of(item_path), load, tags=[item_path, items_tag(path)],
        )

    async def _create(self, path: str, payload, model):
        response = await self._request("POST", path, json=_body(payload))
        self.cache.invalidate(path)
        return model.model_validate(response.json())

    async def _update(self, path: str, item_id: int, changes, model):
        item_path = f"{path}/{item_id}"
        response = await self._request(
            "PATCH", item_path, json=_body(changes, partial=True),
        )
        self.cache.invalidate(path, item_path)
        return model.model_validate(response.json())

    async def _delete(self, path: str, item_id: int, *also_stale: str) -> bool:
        item_path = f"{path}/{item_id}"
        await self._request("DELETE", item_path)
        self.cache.invalidate(path, item_path, *also_stale)
        return True

    # ─── Tasks ──────────────────────────────────────────────────

    async def list_tasks(
        self, filters: TaskFilters | None = None,
    ) -> list[TaskResponse]:
        return await self._cached_list(TASKS, TaskResponse, filters_to_params(filters))

    async def get_task(self, task_id: int) -> TaskResponse | None:
        return await self._cached_item(TASKS, task_id, TaskResponse)

    async def search_tasks(self, text: str) -> list[TaskResponse]:
        return await self._cached_list(
            f"{TASKS}/search", TaskResponse, {"q": text}, tag=TASKS,
        )

    async def create_task(self, payload: TaskCreate | dict) -> TaskResponse:
        return await self._create(TASKS, payload, TaskResponse)

    async def update_task(
        self, task_id: int, changes: TaskUpdate | dict,
    ) -> TaskResponse:
        return await self._update(TASKS, task_id, changes, TaskResponse)

    async def toggle_task_completed(self, task: TaskResponse) -> TaskResponse:
        return await self.update_task(task.id, {"completed": not task.completed})

    async def delete_task(self, task_id: int) -> bool:
        return await self._delete(TASKS, task_id)

    # ─── Appointments ───────────────────────────────────────────

    async def list_appointments(
        self, filters: AppointmentFilters | None = None,
    ) -> list[AppointmentResponse]:
        return await self._cached_list(
            APPOINTMENTS, AppointmentResponse, filters_to_params(filters),
        )

    async def get_appointment(
        self, appointment_id: int,
    ) -> AppointmentResponse | None:
        return await self._cached_item(
            APPOINTMENTS, appointment_id, AppointmentResponse,
        )

    async def search_appointments(self, text: str) -> list[AppointmentResponse]:
        return await self._cached_list(
            f"{APPOINTMENTS}/search", AppointmentResponse, {"q": text},
            tag=APPOINTMENTS,
        )

    async def create_appointment(
        self, payload: AppointmentCreate | dict,
    ) -> AppointmentResponse:
        return await self._create(APPOINTMENTS, payload, AppointmentResponse)

    async def update_appointment(
        self, appointment_id: int, changes: AppointmentUpdate | dict,
    ) -> AppointmentResponse:
        return await self._update(
            APPOINTMENTS, appointment_id, changes, AppointmentResponse,
        )

    async def delete_appointment(self, appointment_id: int) -> bool:
        return await self._delete(APPOINTMENTS, appointment_id)

    # ─── Categories ─────────────────────────────────────────────

    async def list_categories(self) -> list[CategoryResponse]:
        return await self._cached_list(CATEGORIES, CategoryResponse, {})

    async def get_category(self, category_id: int) -> CategoryResponse | None:
        return await self._cached_item(CATEGORIES, category_id, CategoryResponse)

    async def create_category(
        self, payload: CategoryCreate | dict,
    ) -> CategoryResponse:
        return await self._create(CATEGORIES, payload, CategoryResponse)

    async def update_category(
        self, category_id: int, changes: CategoryUpdate | dict,
    ) -> CategoryResponse:
        return await self._update(
            CATEGORIES, category_id, changes, CategoryResponse,
        )

    async def delete_category(self, category_id: int) -> bool:
        """Delete a category; its tasks and appointments come back with categoryId null."""
        return await self._delete(
            CATEGORIES, category_id,
            TASKS, items_tag(TASKS), APPOINTMENTS, items_tag(APPOINTMENTS),
        )

    # ─── Views ──────────────────────────────────────────────────

    async def agenda(self, today: date | str | None = None) -> Agenda:
        """Today / upcoming / completed views over the cached full lists."""
        if today is None:
            today = date.today()
        if isinstance(today, date):
            today = today.isoformat()
        tasks = await self.list_tasks()
        appointments = await self.list_appointments()
        return build_agenda(tasks, appointments, today)
