from task_manager.services.task_service import Found, NotFound, TaskLookup, TaskService

__all__ = ["Found", "NotFound", "TaskLookup", "TaskService"]
