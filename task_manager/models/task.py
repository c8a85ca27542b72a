import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from task_manager.extensions import db

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000


class TaskStatus(str, Enum):
    """Workflow stage of a task. Any status may follow any other."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def parse(cls, raw) -> Optional["TaskStatus"]:
        """Map a wire value onto a member. None passes through, unknown values raise ValueError."""
        if raw is None:
            return None
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown status {raw!r}, expected one of: {allowed}") from None


class Task(db.Model):
    __tablename__ = "tasks"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    description = db.Column(db.String(DESCRIPTION_MAX_LENGTH))
    status = db.Column(
        db.Enum(TaskStatus, name="task_status", native_enum=False, validate_strings=True),
        nullable=False,
        default=TaskStatus.TODO,
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value if self.status is not None else None,
        }

    def __repr__(self):
        return f"<Task id={self.id} title={self.title!r} status={self.status}>"


@dataclass(frozen=True)
class TaskData:
    """Validated request payload for creating or replacing a task."""

    title: str
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
