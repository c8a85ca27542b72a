from flask import Blueprint, current_app, jsonify, request

from task_manager.models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, TaskData, TaskStatus
from task_manager.services.task_service import NotFound, TaskService

tasks_bp = Blueprint("tasks", __name__, url_prefix="/tasks")


class TaskValidationError(ValueError):
    pass


def parse_task_payload(data, require_status: bool = False) -> TaskData:
    """
    Validate a JSON body into TaskData.

    Title must be a non-blank string, description is optional and bounded,
    status must be one of the TaskStatus values. On a replacement (PUT) body
    a missing status means TODO and an explicit null is rejected, since a
    stored task never lacks one.
    """
    if not isinstance(data, dict):
        raise TaskValidationError("Request body must be a JSON object")

    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise TaskValidationError("Title must not be blank")
    if len(title) > TITLE_MAX_LENGTH:
        raise TaskValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")

    description = data.get("description")
    if description is not None:
        if not isinstance(description, str):
            raise TaskValidationError("Description must be a string")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise TaskValidationError(f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters")

    if require_status and "status" not in data:
        return TaskData(title=title, description=description, status=TaskStatus.TODO)

    try:
        status = TaskStatus.parse(data.get("status"))
    except ValueError as e:
        raise TaskValidationError(str(e)) from None
    if status is None and require_status:
        raise TaskValidationError("Status must not be null")

    return TaskData(title=title, description=description, status=status)


def _service() -> TaskService:
    return current_app.extensions["task_service"]


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    raw_status = request.args.get("status", "").strip()
    try:
        status = TaskStatus.parse(raw_status or None)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    tasks = _service().list_tasks(status=status, search=request.args.get("search"))
    return jsonify([task.to_dict() for task in tasks])


@tasks_bp.route("/<uuid:task_id>", methods=["GET"])
def get_task(task_id):
    lookup = _service().get_task(str(task_id))
    if isinstance(lookup, NotFound):
        return "", 404
    return jsonify(lookup.task.to_dict())


@tasks_bp.route("", methods=["POST"])
def create_task():
    try:
        data = parse_task_payload(request.get_json(silent=True))
    except TaskValidationError as e:
        return jsonify({"error": str(e)}), 400

    task = _service().create_task(data)
    return jsonify(task.to_dict()), 201


@tasks_bp.route("/<uuid:task_id>", methods=["PUT"])
def update_task(task_id):
    try:
        data = parse_task_payload(request.get_json(silent=True), require_status=True)
    except TaskValidationError as e:
        return jsonify({"error": str(e)}), 400

    lookup = _service().update_task(str(task_id), data)
    if isinstance(lookup, NotFound):
        return "", 404
    return jsonify(lookup.task.to_dict())


@tasks_bp.route("/<uuid:task_id>", methods=["DELETE"])
def delete_task(task_id):
    if not _service().delete_task(str(task_id)):
        return "", 404
    return "", 204
