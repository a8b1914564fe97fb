"""Agenda Views — pure partitioning of fetched tasks/appointments into home-screen views.

Invariants:
    - No IO: operates on lists already fetched (and cached) by TaskFlowClient
    - today: tasks dated today (completed or not)
    - upcoming: tasks dated after today that are not completed
    - completed: every completed task, whatever its date
    - counts()["tasks_today"] counts today's tasks that are still open

Design Decisions:
    - ISO date strings compared as text (YYYY-MM-DD sorts chronologically)
    - Accepts any objects with date/completed attributes, not only TaskResponse
"""

from dataclasses import dataclass, field


@dataclass
class Agenda:
    today: str
    tasks_today: list = field(default_factory=list)
    tasks_upcoming: list = field(default_factory=list)
    tasks_completed: list = field(default_factory=list)
    appointments_today: list = field(default_factory=list)

    def counts(self) -> dict:
        return {
            "tasks_today": sum(1 for t in self.tasks_today if not t.completed),
            "appointments_today": len(self.appointments_today),
            "tasks_upcoming": len(self.tasks_upcoming),
            "tasks_completed": len(self.tasks_completed),
        }


def build_agenda(tasks, appointments, today: str) -> Agenda:
    """Split tasks and appointments into the today/upcoming/completed views."""
    return Agenda(
        today=today,
        tasks_today=[t for t in tasks if t.date == today],
        tasks_upcoming=[t for t in tasks if t.date > today and not t.completed],
        tasks_completed=[t for t in tasks if t.completed],
        appointments_today=[a for a in appointments if a.date == today],
    )
