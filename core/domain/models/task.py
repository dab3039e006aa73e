from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


# Largest id a 64-bit signed column can hold.
MAX_TASK_ID = 2**63 - 1


class TaskCategory(Enum):
    WORK = "work"
    PERSONAL = "personal"
    URGENT = "urgent"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class Task:
    id: int
    title: str
    completed: bool = False
    category: TaskCategory = TaskCategory.PERSONAL
    created_at: datetime = field(default_factory=_utcnow)
