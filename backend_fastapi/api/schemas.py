from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

from core.domain.models.task import Task, TaskCategory


class CreateTaskRequest(BaseModel):
    title: StrictStr | None = None
    category: StrictStr | None = None


class UpdateTaskRequest(BaseModel):
    title: StrictStr | None = None
    completed: StrictBool | None = None


class TaskResponse(BaseModel):
    """
    Wire representation of a task.

    Field names are camelCase on the wire (``createdAt``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    completed: bool
    category: TaskCategory
    created_at: datetime

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            completed=task.completed,
            category=task.category,
            created_at=task.created_at,
        )


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
