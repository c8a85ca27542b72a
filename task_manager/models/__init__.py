from task_manager.models.task import Task, TaskData, TaskStatus

__all__ = ["Task", "TaskData", "TaskStatus"]
