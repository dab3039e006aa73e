from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class ToggleTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int) -> Task:
        with self._repository.atomic():
            task = self._repository.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)

            task.completed = not task.completed
            self._repository.save(task)
        return task
