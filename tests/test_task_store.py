import unittest

from task_manager import create_app
from task_manager.config import TestConfig
from task_manager.extensions import db
from task_manager.models.task import Task, TaskStatus
from task_manager.repository import SqlAlchemyTaskStore


class TaskStoreTestCase(unittest.TestCase):
    def setUp(self):
        self.app = create_app(TestConfig)
        self.ctx = self.app.app_context()
        self.ctx.push()
        self.store = SqlAlchemyTaskStore(db.session)

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()

    def add(self, title, status=TaskStatus.TODO):
        return self.store.save(Task(title=title, status=status))

    def test_save_assigns_id(self):
        task = self.add("Task")
        self.assertEqual(len(task.id), 36)
        self.assertEqual(self.store.get(task.id).title, "Task")
        self.assertEqual(self.store.count(), 1)

    def test_status_defaults_on_insert(self):
        task = self.store.save(Task(title="Task"))
        self.assertEqual(task.status, TaskStatus.TODO)

    def test_get_missing(self):
        self.assertIsNone(self.store.get("missing"))
        self.assertFalse(self.store.exists("missing"))

    def test_by_status(self):
        self.add("A")
        self.add("B", TaskStatus.DONE)
        self.assertEqual([t.title for t in self.store.by_status(TaskStatus.DONE)], ["B"])

    def test_by_title_is_case_insensitive(self):
        self.add("Plan the TRIP")
        self.add("Trip report")
        self.add("Budget")
        titles = sorted(t.title for t in self.store.by_title("trip"))
        self.assertEqual(titles, ["Plan the TRIP", "Trip report"])

    def test_by_title_folds_non_ascii_case(self):
        self.add("ÉTÉ planning")
        self.add("Ärger mit Öl")
        self.add("Winter")
        self.assertEqual([t.title for t in self.store.by_title("été")], ["ÉTÉ planning"])
        self.assertEqual([t.title for t in self.store.by_title("ÉTÉ")], ["ÉTÉ planning"])
        self.assertEqual([t.title for t in self.store.by_title("ärger MIT öl")], ["Ärger mit Öl"])

    def test_by_title_matches_wildcards_literally(self):
        self.add("100% done")
        self.add("100 percent")
        self.assertEqual([t.title for t in self.store.by_title("100%")], ["100% done"])
        self.assertEqual(self.store.by_title("_"), [])

    def test_delete(self):
        task = self.add("Task")
        self.assertTrue(self.store.exists(task.id))
        self.assertTrue(self.store.delete(task.id))
        self.assertFalse(self.store.exists(task.id))
        self.assertFalse(self.store.delete(task.id))


if __name__ == '__main__':
    unittest.main()
