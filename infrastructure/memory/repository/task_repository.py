import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """
    Process-local task store.

    Tasks live in an insertion-ordered dict keyed by id. The id counter is
    kept apart from the dict so deleting tasks never rewinds it; only
    ``clear()`` resets it. Callers always get copies, so a mutated task only
    reaches the store through ``save()``.

    One re-entrant lock guards both single calls and ``atomic()`` units, so
    a unit holds off every other call until it finishes.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            yield

    def list(self) -> list[Task]:
        with self._lock:
            return [replace(task) for task in self._tasks.values()]

    def add(self, task: Task) -> None:
        with self._lock:
            if task.id in self._tasks:
                raise ValueError(f"Task {task.id} already exists")
            self._tasks[task.id] = replace(task)

    def save(self, task: Task) -> None:
        with self._lock:
            # Re-saving keeps the position; a deleted id stays deleted.
            if task.id in self._tasks:
                self._tasks[task.id] = replace(task)

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task is not None else None

    def delete(self, task_id: int) -> None:
        with self._lock:
            self._tasks.pop(task_id, None)

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()
            self._next_id = 1

    def next_id(self) -> int:
        with self._lock:
            task_id = self._next_id
            self._next_id += 1
            return task_id
