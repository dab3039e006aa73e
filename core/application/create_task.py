import logging
from dataclasses import dataclass

from core.domain.errors import TaskValidationError
from core.domain.models.task import Task, TaskCategory
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None = None
    category: str | None = None


def parse_category(value: str | None) -> TaskCategory:
    if value is None:
        return TaskCategory.PERSONAL
    try:
        return TaskCategory(value)
    except ValueError:
        allowed = ", ".join(c.value for c in TaskCategory)
        raise TaskValidationError(
            f"Invalid category. Must be one of: {allowed}"
        ) from None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        if not cmd.title or not cmd.title.strip():
            logger.warning("Rejected task without title")
            raise TaskValidationError("Title is required")
        category = parse_category(cmd.category)

        with self._repository.atomic():
            task = Task(
                id=self._repository.next_id(),
                title=cmd.title,
                category=category,
            )
            self._repository.add(task)
        logger.info("Created task %s (%s)", task.id, task.category.value)
        return task
