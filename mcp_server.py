""" 
MCP Server wrapping the task manager API (`mcp_server.py`)
"""

import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from task_manager.client import TaskApiClient

# stdout carries the stdio transport, keep logs on stderr
logging.basicConfig(stream=sys.stderr, level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("Task Manager MCP Server")
client = TaskApiClient()


@mcp.resource("tasks://list")
def list_tasks() -> list:
    """Fetch all tasks from the task manager API."""
    return client.list_tasks()


@mcp.tool()
def find_tasks(status: Optional[str] = None, search: Optional[str] = None) -> list:
    """Find tasks by status (TODO, IN_PROGRESS, DONE) or by a case-insensitive title search."""
    return client.list_tasks(status=status, search=search)


@mcp.tool()
def get_task(task_id: str) -> dict:
    """Fetch a single task by id."""
    task = client.get_task(task_id)
    if task is None:
        return {"error": f"Task {task_id} not found"}
    return task


@mcp.tool()
def add_task(title: str, description: Optional[str] = None, status: Optional[str] = None) -> dict:
    """Add a new task. Status defaults to TODO."""
    task = client.create_task(title, description=description, status=status)
    logger.info(f"Added task {task['id']}")
    return task


@mcp.tool()
def update_task(task_id: str, title: str, status: str, description: Optional[str] = None) -> dict:
    """Replace the title, description and status of a task."""
    task = client.update_task(task_id, title, description, status)
    if task is None:
        return {"error": f"Task {task_id} not found"}
    return task


@mcp.tool()
def delete_task(task_id: str) -> dict:
    """Delete a task by id."""
    if not client.delete_task(task_id):
        return {"error": f"Task {task_id} not found"}
    return {"result": "Task deleted"}


if __name__ == "__main__":
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
