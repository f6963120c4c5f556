"""Client-facing error types.

Every error maps to one HTTP status and renders as ``{"error": message}``.
The exception handlers in ``main`` turn them into responses.
"""

from typing import Optional


class TaskServiceError(Exception):
    http_status = 400
    message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": self.message}


class MalformedRequestError(TaskServiceError):
    message = "Invalid request body"


class MissingFieldError(TaskServiceError):
    message = "Missing 'description' in request body"


class InvalidTaskIdError(TaskServiceError):
    message = "Invalid task ID"

    def __init__(self, raw_id: str):
        self.raw_id = raw_id
        super().__init__()


class TaskNotFoundError(TaskServiceError):
    http_status = 404
    message = "Task not found"

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__()
