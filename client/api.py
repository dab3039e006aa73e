import logging
import os
from typing import Any

import httpx
from pydantic import ValidationError

from client.models import RemoteTask

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000/api"
_DEFAULT_TIMEOUT = 10.0


class TaskApiError(Exception):
    """A request to the task API failed (transport error or non-2xx reply)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        payload = response.json()
    except ValueError:
        return fallback
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return fallback


class TaskApiClient:
    """
    Thin synchronous client for the task API.

    Args:
        base_url:    API root including the ``/api`` prefix. Defaults to
                     ``TASKS_API_URL`` or ``http://localhost:5000/api``.
        http_client: Existing ``httpx.Client`` to send requests through
                     (FastAPI's ``TestClient`` works too). When omitted the
                     client creates and owns one.
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = _DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = (base_url or os.getenv("TASKS_API_URL", DEFAULT_API_URL)).rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, fallback: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TaskApiError(fallback) from e

        if not response.is_success:
            message = _error_message(response, fallback)
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
            raise TaskApiError(message, status_code=response.status_code)
        return response

    @staticmethod
    def _task(response: httpx.Response, fallback: str) -> RemoteTask:
        try:
            return RemoteTask.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise TaskApiError(fallback, status_code=response.status_code) from e

    def list_tasks(self) -> list[RemoteTask]:
        fallback = "Failed to fetch tasks"
        response = self._request("GET", "/tasks", fallback)
        try:
            return [RemoteTask.model_validate(item) for item in response.json()]
        except (TypeError, ValueError, ValidationError) as e:
            raise TaskApiError(fallback, status_code=response.status_code) from e

    def get_task(self, task_id: int) -> RemoteTask:
        fallback = "Failed to fetch task"
        return self._task(self._request("GET", f"/tasks/{task_id}", fallback), fallback)

    def create_task(self, title: str, category: str | None = None) -> RemoteTask:
        fallback = "Failed to add task"
        payload: dict[str, Any] = {"title": title}
        if category is not None:
            payload["category"] = category
        response = self._request("POST", "/tasks", fallback, json=payload)
        return self._task(response, fallback)

    def toggle_task(self, task_id: int) -> RemoteTask:
        fallback = "Failed to toggle task"
        return self._task(self._request("PATCH", f"/tasks/{task_id}", fallback), fallback)

    def update_task(
        self,
        task_id: int,
        title: str | None = None,
        completed: bool | None = None,
    ) -> RemoteTask:
        fallback = "Failed to update task"
        payload: dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        if completed is not None:
            payload["completed"] = completed
        response = self._request("PUT", f"/tasks/{task_id}", fallback, json=payload)
        return self._task(response, fallback)

    def delete_task(self, task_id: int) -> None:
        # Both 200 with a message and 204 with no body mean success.
        self._request("DELETE", f"/tasks/{task_id}", "Failed to delete task")

    def clear_tasks(self) -> None:
        self._request("DELETE", "/tasks", "Failed to clear tasks")

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/health", "Health check failed").json()
