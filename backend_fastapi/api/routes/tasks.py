from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from backend_fastapi.api.deps import (
    clear_tasks_use_case,
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    toggle_task_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    CreateTaskRequest,
    ErrorResponse,
    MessageResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from core.application.clear_tasks import ClearTasksUseCase
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.toggle_task import ToggleTaskUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import MAX_TASK_ID

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Ids the stores can hold; anything else is rejected before reaching a use case.
TaskId = Annotated[int, Path(ge=1, le=MAX_TASK_ID)]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="List all tasks",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskResponse]:
    """
    Returns every task in creation order.
    """
    return [TaskResponse.from_domain(task) for task in use_case.execute()]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses=_NOT_FOUND,
    summary="Get a task",
)
def get_task(
    task_id: TaskId,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    return TaskResponse.from_domain(use_case.execute(task_id))


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    summary="Create a task",
)
def create_task(
    body: CreateTaskRequest | None = None,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskResponse:
    """
    Creates a new task.

    - **title**: Task title, required and non-empty.
    - **category**: `work`, `personal` or `urgent` (defaults to `personal`).
    """
    body = body or CreateTaskRequest()
    cmd = CreateTaskCommand(title=body.title, category=body.category)
    return TaskResponse.from_domain(use_case.execute(cmd))


@router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    responses=_NOT_FOUND,
    summary="Toggle task completion",
)
def toggle_task(
    task_id: TaskId,
    use_case: ToggleTaskUseCase = Depends(toggle_task_use_case),
) -> TaskResponse:
    return TaskResponse.from_domain(use_case.execute(task_id))


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    responses={**_NOT_FOUND, **_INVALID},
    summary="Update a task",
)
def update_task(
    task_id: TaskId,
    body: UpdateTaskRequest | None = None,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskResponse:
    """
    Applies the fields present in the body; absent fields are left as they are.

    - **task_id**: Id of the task to modify.
    - **title**: New title.
    - **completed**: New completion flag (must be a boolean).
    """
    body = body or UpdateTaskRequest()
    cmd = UpdateTaskCommand(title=body.title, completed=body.completed)
    return TaskResponse.from_domain(use_case.execute(task_id, cmd))


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Delete a task",
)
def delete_task(
    task_id: TaskId,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> MessageResponse:
    use_case.execute(DeleteTaskCommand(id=task_id))
    return MessageResponse(message="Task deleted successfully")


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Clear all tasks",
)
def clear_tasks(
    use_case: ClearTasksUseCase = Depends(clear_tasks_use_case),
) -> MessageResponse:
    """
    Removes every task and restarts id assignment at 1.
    """
    use_case.execute()
    return MessageResponse(message="All tasks cleared")
