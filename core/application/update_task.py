from dataclasses import dataclass

from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class UpdateTaskCommand:
    """Partial update; ``None`` means the field was not sent."""

    title: str | None = None
    completed: bool | None = None


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        with self._repository.atomic():
            task = self._repository.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)

            if cmd.title is not None:
                if not cmd.title.strip():
                    raise TaskValidationError("Title cannot be empty")
                task.title = cmd.title
            if cmd.completed is not None:
                if not isinstance(cmd.completed, bool):
                    raise TaskValidationError("Completed must be a boolean")
                task.completed = cmd.completed

            self._repository.save(task)
        return task
