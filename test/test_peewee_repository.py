import os
import unittest
from datetime import datetime, timezone

# Use memory database for tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from core.domain.models.task import Task, TaskCategory

try:
    from infrastructure.peewee.session.db import db
    from infrastructure.peewee.model.models import TaskModel, TaskSequenceModel
    from infrastructure.peewee.repository.task_repository import (
        PeeweeTaskRepository,
    )
    HAS_PEEWEE = True
except ImportError:
    HAS_PEEWEE = False


@unittest.skipUnless(HAS_PEEWEE, "Peewee not available")
class PeeweeTaskRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        if db.is_closed():
            db.connect()
        db.create_tables([TaskModel, TaskSequenceModel], safe=True)
        TaskModel.delete().execute()
        TaskSequenceModel.delete().execute()
        self.repo = PeeweeTaskRepository()

    def tearDown(self) -> None:
        db.drop_tables([TaskModel, TaskSequenceModel])
        self.repo.close()

    def test_save_and_get(self) -> None:
        created_at = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        task = Task(
            id=self.repo.next_id(),
            title="Peewee task",
            completed=True,
            category=TaskCategory.URGENT,
            created_at=created_at,
        )

        self.repo.add(task)
        loaded = self.repo.get(task.id)

        self.assertIsNotNone(loaded)
        self.assertEqual(loaded.id, 1)
        self.assertEqual(loaded.title, task.title)
        self.assertTrue(loaded.completed)
        self.assertEqual(loaded.category, TaskCategory.URGENT)
        self.assertEqual(loaded.created_at, created_at)

    def test_save_existing_updates_in_place(self) -> None:
        task = Task(id=self.repo.next_id(), title="Before")
        self.repo.add(task)

        task.title = "After"
        task.completed = True
        self.repo.save(task)

        loaded = self.repo.get(task.id)
        self.assertEqual(loaded.title, "After")
        self.assertTrue(loaded.completed)
        self.assertEqual(len(self.repo.list()), 1)

    def test_list_in_insertion_order(self) -> None:
        for title in ("first", "second", "third"):
            self.repo.add(Task(id=self.repo.next_id(), title=title))

        self.assertEqual([t.title for t in self.repo.list()], ["first", "second", "third"])

    def test_delete_does_not_rewind_ids(self) -> None:
        task = Task(id=self.repo.next_id(), title="Delete Peewee")
        self.repo.add(task)

        self.repo.delete(task.id)

        self.assertIsNone(self.repo.get(task.id))
        self.assertEqual(self.repo.next_id(), 2)

    def test_clear_resets_ids(self) -> None:
        self.repo.add(Task(id=self.repo.next_id(), title="one"))
        self.repo.add(Task(id=self.repo.next_id(), title="two"))

        self.repo.clear()

        self.assertEqual(self.repo.list(), [])
        self.assertEqual(self.repo.next_id(), 1)

    def test_save_does_not_bring_back_deleted_task(self) -> None:
        task = Task(id=self.repo.next_id(), title="Gone")
        self.repo.add(task)
        self.repo.delete(task.id)

        task.completed = True
        self.repo.save(task)

        self.assertIsNone(self.repo.get(task.id))
        self.assertEqual(self.repo.list(), [])

    def test_out_of_range_ids_are_missing(self) -> None:
        huge = 10**30

        self.assertIsNone(self.repo.get(huge))
        self.repo.delete(huge)
        self.repo.save(Task(id=huge, title="never stored"))
        self.assertEqual(self.repo.list(), [])



if __name__ == "__main__":
    unittest.main()
