import unittest

from core.application.clear_tasks import ClearTasksUseCase
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.toggle_task import ToggleTaskUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, TaskCategory
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()
        self.create = CreateTaskUseCase(self.repo)

    def test_create_task_assigns_sequential_ids_and_saves(self) -> None:
        first = self.create.execute(CreateTaskCommand(title="Buy milk"))
        second = self.create.execute(CreateTaskCommand(title="Walk dog", category="work"))

        self.assertEqual(first.id, 1)
        self.assertEqual(second.id, 2)
        self.assertFalse(first.completed)
        self.assertEqual(first.category, TaskCategory.PERSONAL)
        self.assertEqual(second.category, TaskCategory.WORK)
        self.assertIsNotNone(first.created_at.tzinfo)
        self.assertEqual(self.repo.get(first.id), first)

    def test_create_task_without_title_is_rejected(self) -> None:
        for title in (None, "", "   "):
            with self.subTest(title=title):
                with self.assertRaises(TaskValidationError) as ctx:
                    self.create.execute(CreateTaskCommand(title=title))
                self.assertEqual(ctx.exception.message, "Title is required")
        self.assertEqual(self.repo.list(), [])

    def test_create_task_with_invalid_category_is_rejected(self) -> None:
        with self.assertRaises(TaskValidationError):
            self.create.execute(CreateTaskCommand(title="X", category="invalid"))
        self.assertEqual(self.repo.list(), [])

    def test_list_tasks_keeps_insertion_order(self) -> None:
        for title in ("c", "a", "b"):
            self.create.execute(CreateTaskCommand(title=title))

        titles = [t.title for t in ListTasksUseCase(self.repo).execute()]

        self.assertEqual(titles, ["c", "a", "b"])

    def test_get_task_missing_raises_not_found(self) -> None:
        with self.assertRaises(TaskNotFoundError) as ctx:
            GetTaskUseCase(self.repo).execute(42)
        self.assertEqual(ctx.exception.message, "Task not found")
        self.assertEqual(ctx.exception.task_id, 42)

    def test_toggle_task_is_self_inverse(self) -> None:
        task = self.create.execute(CreateTaskCommand(title="Toggle me"))
        use_case = ToggleTaskUseCase(self.repo)

        self.assertTrue(use_case.execute(task.id).completed)
        self.assertFalse(use_case.execute(task.id).completed)
        self.assertFalse(self.repo.get(task.id).completed)

    def test_update_task_applies_only_present_fields(self) -> None:
        task = self.create.execute(CreateTaskCommand(title="Initial"))
        use_case = UpdateTaskUseCase(self.repo)

        updated = use_case.execute(task.id, UpdateTaskCommand(completed=True))
        self.assertEqual(updated.title, "Initial")
        self.assertTrue(updated.completed)

        updated = use_case.execute(task.id, UpdateTaskCommand(title="Renamed"))
        self.assertEqual(updated.title, "Renamed")
        self.assertTrue(updated.completed)
        self.assertEqual(self.repo.get(task.id), updated)

    def test_update_task_rejects_empty_title(self) -> None:
        task = self.create.execute(CreateTaskCommand(title="Initial"))

        with self.assertRaises(TaskValidationError):
            UpdateTaskUseCase(self.repo).execute(task.id, UpdateTaskCommand(title=""))
        self.assertEqual(self.repo.get(task.id).title, "Initial")

    def test_update_task_missing_raises_not_found(self) -> None:
        with self.assertRaises(TaskNotFoundError):
            UpdateTaskUseCase(self.repo).execute(7, UpdateTaskCommand(title="x"))

    def test_delete_task_removes_and_never_reuses_id(self) -> None:
        task = self.create.execute(CreateTaskCommand(title="Delete me"))

        DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=task.id))

        self.assertIsNone(self.repo.get(task.id))
        with self.assertRaises(TaskNotFoundError):
            ToggleTaskUseCase(self.repo).execute(task.id)
        self.assertEqual(self.create.execute(CreateTaskCommand(title="Next")).id, 2)

    def test_delete_task_missing_raises_not_found(self) -> None:
        with self.assertRaises(TaskNotFoundError):
            DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=99))

    def test_clear_tasks_empties_store_and_resets_ids(self) -> None:
        self.create.execute(CreateTaskCommand(title="one"))
        self.create.execute(CreateTaskCommand(title="two"))

        ClearTasksUseCase(self.repo).execute()

        self.assertEqual(self.repo.list(), [])
        self.assertEqual(self.create.execute(CreateTaskCommand(title="again")).id, 1)


class InMemoryTaskRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def test_get_returns_copy(self) -> None:
        self.repo.add(Task(id=self.repo.next_id(), title="Original"))

        loaded = self.repo.get(1)
        loaded.title = "Changed"

        self.assertEqual(self.repo.get(1).title, "Original")

    def test_resave_keeps_position(self) -> None:
        for title in ("a", "b"):
            self.repo.add(Task(id=self.repo.next_id(), title=title))

        first = self.repo.get(1)
        first.completed = True
        self.repo.save(first)

        self.assertEqual([t.id for t in self.repo.list()], [1, 2])

    def test_counter_ignores_deletions(self) -> None:
        self.repo.add(Task(id=self.repo.next_id(), title="a"))
        self.repo.delete(1)
        self.repo.delete(1)

        self.assertEqual(self.repo.next_id(), 2)

    def test_save_does_not_bring_back_deleted_task(self) -> None:
        task = Task(id=self.repo.next_id(), title="a")
        self.repo.add(task)
        self.repo.delete(task.id)

        task.completed = True
        self.repo.save(task)

        self.assertIsNone(self.repo.get(task.id))
        self.assertEqual(self.repo.list(), [])

    def test_add_refuses_existing_id(self) -> None:
        self.repo.add(Task(id=1, title="first"))

        with self.assertRaises(ValueError):
            self.repo.add(Task(id=1, title="second"))
        self.assertEqual(self.repo.get(1).title, "first")



if __name__ == "__main__":
    unittest.main()
