import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.domain.errors import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    message = first.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {message}" if loc else message


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    logger.info("%s %s: task %s not found", request.method, request.url.path, exc.task_id)
    return _error(status.HTTP_404_NOT_FOUND, exc.message)


async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _describe(exc)
    logger.warning("%s %s: %s", request.method, request.url.path, message)
    return _error(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(TaskValidationError, task_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
