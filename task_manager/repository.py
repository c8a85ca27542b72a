"""
SQLAlchemy-backed task store.

The service only sees the TaskStore protocol, so tests can hand it an
in-memory double instead of a database session.
"""

import logging
from typing import List, Optional, Protocol

from sqlalchemy import func, select

from task_manager.models.task import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    def save(self, task: Task) -> Task: ...

    def get(self, task_id: str) -> Optional[Task]: ...

    def all(self) -> List[Task]: ...

    def by_status(self, status: TaskStatus) -> List[Task]: ...

    def by_title(self, text: str) -> List[Task]: ...

    def delete(self, task_id: str) -> bool: ...

    def exists(self, task_id: str) -> bool: ...


class SqlAlchemyTaskStore:
    def __init__(self, session):
        self.session = session

    def save(self, task: Task) -> Task:
        """Insert a new task (id assigned on flush) or persist changes to a loaded one."""
        self.session.add(task)
        self.session.commit()
        logger.debug(f"Saved task {task.id}")
        return task

    def get(self, task_id: str) -> Optional[Task]:
        return self.session.get(Task, task_id)

    def all(self) -> List[Task]:
        return list(self.session.execute(select(Task)).scalars())

    def by_status(self, status: TaskStatus) -> List[Task]:
        stmt = select(Task).where(Task.status == status)
        return list(self.session.execute(stmt).scalars())

    def by_title(self, text: str) -> List[Task]:
        # autoescape makes % and _ in the search text match literally;
        # lower() folds Unicode on SQLite too, see extensions.use_unicode_lower
        stmt = select(Task).where(func.lower(Task.title).contains(text.lower(), autoescape=True))
        return list(self.session.execute(stmt).scalars())

    def delete(self, task_id: str) -> bool:
        task = self.get(task_id)
        if task is None:
            return False
        self.session.delete(task)
        self.session.commit()
        return True

    def exists(self, task_id: str) -> bool:
        stmt = select(Task.id).where(Task.id == task_id)
        return self.session.execute(stmt).first() is not None

    def count(self) -> int:
        return self.session.execute(select(func.count()).select_from(Task)).scalar_one()
