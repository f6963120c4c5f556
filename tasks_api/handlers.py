import logging
import re
from typing import List, Type

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, ValidationError

from .errors import InvalidTaskIdError, MalformedRequestError, MissingFieldError
from .schemas import (
    ErrorResponse,
    HealthResponse,
    NewTaskRequest,
    Task,
    UpdateTaskRequest,
)
from .store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter()

_TASK_ID = re.compile(r"[+-]?[0-9]+")
_TASK_ID_MIN = -(2**63)
_TASK_ID_MAX = 2**63 - 1

_BAD_REQUEST = {400: {"model": ErrorResponse}}
_BY_ID_ERRORS = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


def parse_task_id(task_id: str) -> int:
    if not _TASK_ID.fullmatch(task_id):
        raise InvalidTaskIdError(task_id)
    value = int(task_id)
    if not _TASK_ID_MIN <= value <= _TASK_ID_MAX:
        raise InvalidTaskIdError(task_id)
    return value


async def read_body(request: Request) -> bytes:
    return await request.body()


def decode_payload(model: Type[BaseModel], body: bytes):
    """Decode a JSON body into ``model`` whatever Content-Type the client sent."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        logger.debug(f"Undecodable {model.__name__}: {exc.errors()}")
        raise MalformedRequestError() from exc


@router.get("/healthz", response_model=HealthResponse)
def health_check():
    return HealthResponse(status="ok")


@router.post(
    "/tasks",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
def create_task(
    body: bytes = Depends(read_body),
    store: TaskStore = Depends(get_store),
):
    payload = decode_payload(NewTaskRequest, body)
    if not payload.description:
        raise MissingFieldError()
    task = store.create(payload.description)
    logger.info(f"New task created: id={task.id}")
    return task


@router.get("/tasks", response_model=List[Task])
def list_tasks(store: TaskStore = Depends(get_store)):
    return store.list()


@router.get("/tasks/{task_id}", response_model=Task, responses=_BY_ID_ERRORS)
def get_task(
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_store),
):
    return store.get(task_id)


@router.put("/tasks/{task_id}", response_model=Task, responses=_BY_ID_ERRORS)
def update_task(
    task_id: int = Depends(parse_task_id),
    body: bytes = Depends(read_body),
    store: TaskStore = Depends(get_store),
):
    payload = decode_payload(UpdateTaskRequest, body)
    task = store.update(
        task_id,
        description=payload.description,
        done=payload.done,
    )
    logger.info(f"Task updated: id={task.id} done={task.done}")
    return task


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_BY_ID_ERRORS,
)
def delete_task(
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_store),
):
    store.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
