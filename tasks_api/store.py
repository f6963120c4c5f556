"""In-memory task store.

All tasks and the id counter live behind one reader/writer lock, so id
assignment and the map write happen as a single step. Tasks handed out are
copies; the store keeps the only live instances.
"""

import logging
from typing import Dict, List, Optional

from .errors import TaskNotFoundError
from .rwlock import ReadWriteLock
from .schemas import Task

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)

    def create(self, description: str) -> Task:
        with self._lock.write_locked():
            task = Task(id=self._next_id, description=description, done=False)
            self._tasks[task.id] = task
            self._next_id += 1
        logger.debug(f"Created task id={task.id}")
        return task.model_copy()

    def list(self) -> List[Task]:
        """Return copies of all tasks ordered by id."""
        with self._lock.read_locked():
            tasks = [task.model_copy() for task in self._tasks.values()]
        tasks.sort(key=lambda t: t.id)
        return tasks

    def get(self, task_id: int) -> Task:
        with self._lock.read_locked():
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task.model_copy()

    def update(
        self,
        task_id: int,
        description: Optional[str] = None,
        done: Optional[bool] = None,
    ) -> Task:
        """Replace only the fields that were supplied (not None)."""
        changes = {}
        if description is not None:
            changes["description"] = description
        if done is not None:
            changes["done"] = done

        with self._lock.write_locked():
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            task = task.model_copy(update=changes)
            self._tasks[task_id] = task
        logger.debug(f"Updated task id={task_id} fields={sorted(changes)}")
        return task.model_copy()

    def delete(self, task_id: int) -> None:
        with self._lock.write_locked():
            if self._tasks.pop(task_id, None) is None:
                raise TaskNotFoundError(task_id)
        logger.debug(f"Deleted task id={task_id}")
