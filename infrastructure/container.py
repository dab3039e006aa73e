import logging
import os

from core.application.clear_tasks import ClearTasksUseCase
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.toggle_task import ToggleTaskUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository

logger = logging.getLogger(__name__)


def build_task_repository() -> TaskRepository:
    store = os.getenv("TASK_STORE", "memory").lower()

    if store == "peewee":
        # Imported here so the default store never opens a database.
        from infrastructure.peewee.repository.task_repository import (
            PeeweeTaskRepository,
        )

        logger.info("Using peewee task store")
        return PeeweeTaskRepository()
    if store != "memory":
        logger.warning("Unknown TASK_STORE %r, falling back to memory", store)
    # Default to in-memory
    return InMemoryTaskRepository()


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_toggle_task_use_case(repository: TaskRepository) -> ToggleTaskUseCase:
    return ToggleTaskUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)


def get_clear_tasks_use_case(repository: TaskRepository) -> ClearTasksUseCase:
    return ClearTasksUseCase(repository=repository)
