class TaskError(Exception):
    """Base class for errors raised by the task use cases."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskError):
    """The request carried missing or malformed input."""


class TaskNotFoundError(TaskError):
    """No task with the requested id exists in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__("Task not found")
        self.task_id = task_id
