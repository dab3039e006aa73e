import logging

from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class ClearTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> None:
        with self._repository.atomic():
            self._repository.clear()
        logger.info("Cleared all tasks")
