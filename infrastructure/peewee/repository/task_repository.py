import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timezone
from typing import List

from core.domain.models.task import MAX_TASK_ID, Task, TaskCategory
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel, TaskSequenceModel
from infrastructure.peewee.session.db import db

_SEQUENCE_NAME = "tasks"


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        completed=model.completed,
        category=TaskCategory(model.category),
        # SQLite keeps naive timestamps; they are written as UTC.
        created_at=model.created_at.replace(tzinfo=timezone.utc),
    )


def _storable(task_id: int) -> bool:
    return 0 < task_id <= MAX_TASK_ID


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Each worker thread gets its own connection; the lock keeps units
        # from interleaving between them.
        self._lock = threading.RLock()
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel, TaskSequenceModel], safe=True)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock, db.atomic():
            yield

    def add(self, task: Task) -> None:
        created_at = task.created_at.astimezone(timezone.utc).replace(tzinfo=None)
        TaskModel.create(
            id=task.id,
            title=task.title,
            completed=task.completed,
            category=task.category.value,
            created_at=created_at,
        )

    def save(self, task: Task) -> None:
        if not _storable(task.id):
            return
        TaskModel.update(
            title=task.title,
            completed=task.completed,
            category=task.category.value,
        ).where(TaskModel.id == task.id).execute()

    def get(self, task_id: int) -> Task | None:
        if not _storable(task_id):
            return None
        try:
            return _to_domain(TaskModel.get(TaskModel.id == task_id))
        except TaskModel.DoesNotExist:
            return None

    def list(self) -> List[Task]:
        # Ids are handed out in insertion order, so id order is insertion order.
        return [_to_domain(t) for t in TaskModel.select().order_by(TaskModel.id)]

    def delete(self, task_id: int) -> None:
        if not _storable(task_id):
            return
        TaskModel.delete().where(TaskModel.id == task_id).execute()

    def clear(self) -> None:
        with self.atomic():
            TaskModel.delete().execute()
            TaskSequenceModel.delete().execute()

    def next_id(self) -> int:
        with self.atomic():
            sequence, _ = TaskSequenceModel.get_or_create(
                name=_SEQUENCE_NAME, defaults={"value": 1}
            )
            task_id = sequence.value
            TaskSequenceModel.update(value=TaskSequenceModel.value + 1).where(
                TaskSequenceModel.name == _SEQUENCE_NAME
            ).execute()
        return task_id

    def close(self) -> None:
        if not db.is_closed():
            db.close()
