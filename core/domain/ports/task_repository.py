from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Run the enclosed reads and writes as one unit.

        Units never interleave: a second unit waits until the first one
        leaves the block.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Task]:
        """Return every task in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def add(self, task: Task) -> None:
        """Insert a task under a freshly reserved id."""
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> None:
        """Store changes to an existing task. Unknown ids are ignored."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Remove every task and rewind the id counter to 1."""
        raise NotImplementedError

    @abstractmethod
    def next_id(self) -> int:
        """Reserve the next id. Ids are never handed out twice."""
        raise NotImplementedError

    def close(self) -> None:
        return None
