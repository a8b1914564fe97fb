"""Task Routes — REST CRUD, filtered listing, and search for tasks.

Invariants:
    - Bodies validated by TaskCreate / TaskUpdate before any store call
    - Missing ids → 404 via ResourceNotFoundError (stores return None/False)
    - /search is declared before /{task_id} so it is never parsed as an id
    - A categoryId naming no category → 400 before anything is written

Design Decisions:
    - Responses built explicitly with TaskResponse.model_validate: serialization
      never depends on lazy ORM attribute access after the session closes
"""

from fastapi import APIRouter, Depends, Query, status

from taskflow.api.dependencies import (
    get_category_store, get_task_store, require_category, task_filters,
)
from taskflow.core.domain_types import TaskId
from taskflow.core.errors import ResourceNotFoundError
from taskflow.core.filters import TaskFilters
from taskflow.core.repository_protocols import CategoryRepository, TaskRepository
from taskflow.schemas.task import TaskCreate, TaskResponse, TaskUpdate

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    filters: TaskFilters = Depends(task_filters),
    store: TaskRepository = Depends(get_task_store),
):
    """List tasks matching the filter set."""
    tasks = await store.list(filters)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/search", response_model=list[TaskResponse])
async def search_tasks(
    q: str = Query(min_length=1, max_length=200),
    store: TaskRepository = Depends(get_task_store),
):
    """Case-insensitive search over title, description, and category."""
    tasks = await store.search(q)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int, store: TaskRepository = Depends(get_task_store),
):
    task = await store.get(TaskId(task_id))
    if task is None:
        raise ResourceNotFoundError("Task", task_id)
    return TaskResponse.model_validate(task)


@router.post(
    "", response_model=TaskResponse, status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate,
    store: TaskRepository = Depends(get_task_store),
    categories: CategoryRepository = Depends(get_category_store),
):
    """Create a task. Server assigns id, timestamps, and column defaults."""
    await require_category(body.category_id, categories)
    task = await store.create(body)
    return TaskResponse.model_validate(task)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    body: TaskUpdate,
    store: TaskRepository = Depends(get_task_store),
    categories: CategoryRepository = Depends(get_category_store),
):
    """Apply only the fields present in the request body."""
    await require_category(body.category_id, categories)
    task = await store.update(TaskId(task_id), body)
    if task is None:
        raise ResourceNotFoundError("Task", task_id)
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}")
async def delete_task(
    task_id: int, store: TaskRepository = Depends(get_task_store),
):
    if not await store.delete(TaskId(task_id)):
        raise ResourceNotFoundError("Task", task_id)
    return {"success": True}
