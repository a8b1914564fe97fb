"""Core Boundary — core modules import only core and the standard library.

Tests:
    - No module under taskflow.core imports models, schemas, services, api, or
      infrastructure (dependency arrows point inward only)
    - The stores satisfy the repository Protocols structurally
"""

import ast
from pathlib import Path

import pytest

import taskflow.core
from taskflow.core import repository_protocols
from taskflow.services.appointment_store import AppointmentStore
from taskflow.services.category_store import CategoryStore
from taskflow.services.task_store import TaskStore

CORE_DIR = Path(taskflow.core.__file__).parent


def _taskflow_imports(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    names = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            names.add(node.module)
        elif isinstance(node, ast.Import):
            names.update(alias.name for alias in node.names)
    return {n for n in names if n.startswith("taskflow")}


@pytest.mark.parametrize(
    "module_path", sorted(CORE_DIR.glob("*.py")), ids=lambda p: p.name,
)
def test_core_never_imports_shell(module_path):
    outside = {
        name for name in _taskflow_imports(module_path)
        if not name.startswith("taskflow.core")
    }
    assert outside == set()


@pytest.mark.parametrize("store, protocol", [
    (TaskStore, repository_protocols.TaskRepository),
    (AppointmentStore, repository_protocols.AppointmentRepository),
    (CategoryStore, repository_protocols.CategoryRepository),
])
def test_stores_provide_every_protocol_method(store, protocol):
    wanted = {
        name for name, value in vars(protocol).items()
        if callable(value) and not name.startswith("_")
    }
    assert wanted
    assert all(callable(getattr(store, name, None)) for name in wanted)
