from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Task]:
        return self._repository.list()
