import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from task_manager.models.task import Task, TaskData, TaskStatus
from task_manager.repository import TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    task: Task


@dataclass(frozen=True)
class NotFound:
    task_id: str


TaskLookup = Union[Found, NotFound]


class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self, status: Optional[TaskStatus] = None, search: Optional[str] = None) -> List[Task]:
        """
        Return tasks matching at most one filter.

        A status filter wins over a search string; a blank search string
        counts as no filter at all.
        """
        if status is not None:
            return self.store.by_status(status)
        if search is not None and search.strip():
            return self.store.by_title(search)
        return self.store.all()

    def get_task(self, task_id: str) -> TaskLookup:
        task = self.store.get(task_id)
        if task is None:
            logger.debug(f"Task {task_id} not found")
            return NotFound(task_id)
        return Found(task)

    def create_task(self, data: TaskData) -> Task:
        task = Task(
            title=data.title,
            description=data.description,
            status=data.status if data.status is not None else TaskStatus.TODO,
        )
        task = self.store.save(task)
        logger.info(f"Created task {task.id} with status {task.status.value}")
        return task

    def update_task(self, task_id: str, data: TaskData) -> TaskLookup:
        """Replace title, description and status of an existing task wholesale."""
        lookup = self.get_task(task_id)
        if isinstance(lookup, NotFound):
            return lookup

        task = lookup.task
        task.title = data.title
        task.description = data.description
        task.status = data.status
        task = self.store.save(task)
        logger.info(f"Updated task {task_id}")
        return Found(task)

    def delete_task(self, task_id: str) -> bool:
        if not self.store.exists(task_id):
            logger.debug(f"Delete skipped, task {task_id} not found")
            return False
        deleted = self.store.delete(task_id)
        if deleted:
            logger.info(f"Deleted task {task_id}")
        return deleted
