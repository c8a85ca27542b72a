from task_manager.routes.tasks import tasks_bp

__all__ = ["tasks_bp"]
