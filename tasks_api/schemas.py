from pydantic import BaseModel, StrictBool, StrictStr
from typing import Optional


class Task(BaseModel):
    id: int
    description: str
    done: bool = False


class NewTaskRequest(BaseModel):
    description: Optional[StrictStr] = None


class UpdateTaskRequest(BaseModel):
    """Partial update: a field left as None was not supplied and is kept."""

    description: Optional[StrictStr] = None
    done: Optional[StrictBool] = None


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
