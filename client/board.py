"""Board view model: mirrors the server's task list and turns user gestures
into API calls.

Local state only changes from a successful server response; a failed call
sets ``error`` and leaves ``tasks`` (and the draft input) as they were.
"""
import logging

from client.api import TaskApiClient, TaskApiError
from client.models import RemoteTask

logger = logging.getLogger(__name__)


class TaskBoard:
    def __init__(self, api: TaskApiClient) -> None:
        self._api = api
        self.tasks: list[RemoteTask] = []
        self.loading: bool = False
        self.error: str | None = None
        self.draft: str = ""

    def load(self) -> bool:
        self.loading = True
        self.error = None
        try:
            self.tasks = self._api.list_tasks()
            return True
        except TaskApiError as e:
            logger.error("Error fetching tasks: %s", e.message)
            self.error = e.message
            return False
        finally:
            self.loading = False

    def add(self, title: str, category: str | None = None) -> bool:
        if not title.strip():
            return False
        self.error = None
        try:
            task = self._api.create_task(title, category=category)
        except TaskApiError as e:
            logger.error("Error adding task: %s", e.message)
            self.error = e.message
            return False
        self.tasks = [*self.tasks, task]
        self.draft = ""
        return True

    def submit_draft(self, category: str | None = None) -> bool:
        return self.add(self.draft, category=category)

    def toggle(self, task_id: int) -> bool:
        self.error = None
        try:
            updated = self._api.toggle_task(task_id)
        except TaskApiError as e:
            logger.error("Error toggling task %s: %s", task_id, e.message)
            self.error = e.message
            return False
        self.tasks = [updated if task.id == task_id else task for task in self.tasks]
        return True

    def delete(self, task_id: int) -> bool:
        self.error = None
        try:
            self._api.delete_task(task_id)
        except TaskApiError as e:
            logger.error("Error deleting task %s: %s", task_id, e.message)
            self.error = e.message
            return False
        self.tasks = [task for task in self.tasks if task.id != task_id]
        return True
