"""
HTTP client for the task manager API.
"""

from typing import Optional

import requests

from task_manager.config import API_URL


class TaskApiClient:
    def __init__(self, base_url: str = API_URL, timeout: float = 10.0):
        self.tasks_url = f"{base_url.rstrip('/')}/tasks"
        self.timeout = timeout

    def list_tasks(self, status: Optional[str] = None, search: Optional[str] = None) -> list:
        """Fetch tasks, optionally filtered by status or a title search."""
        params = {}
        if status:
            params["status"] = status
        if search:
            params["search"] = search
        response = requests.get(self.tasks_url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_task(self, task_id: str) -> Optional[dict]:
        response = requests.get(f"{self.tasks_url}/{task_id}", timeout=self.timeout)
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()

    def create_task(self, title: str, description: Optional[str] = None, status: Optional[str] = None) -> dict:
        payload = {"title": title, "description": description, "status": status}
        response = requests.post(self.tasks_url, json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def update_task(self, task_id: str, title: str, description: Optional[str], status: str) -> Optional[dict]:
        """Replace every field of a task. Returns None if the task does not exist."""
        payload = {"title": title, "description": description, "status": status}
        response = requests.put(f"{self.tasks_url}/{task_id}", json=payload, timeout=self.timeout)
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()

    def delete_task(self, task_id: str) -> bool:
        response = requests.delete(f"{self.tasks_url}/{task_id}", timeout=self.timeout)
        if response.status_code == 404:
            return False
        response.raise_for_status()
        return True
