# src/orion_tasks/tasks/task_list.py

"""
Task management engine.

The storage file is the only source of truth. Every public call:
- reads the full collection,
- applies a pure operation (list in, (new list, result) out),
- writes the full collection back if the operation changed it.

Nothing is cached between calls.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TypeVar

from ..core.ports import TaskStorage
from .fuzzy import FUZZY_SEARCH_THRESHOLD, is_fuzzy_match
from .task_models import Deadline, Event, Task, Todo
from .task_store import TaskStoreWriteError

logger = logging.getLogger(__name__)

R = TypeVar("R")

# ---- pure operations (no I/O) ----


def next_id(tasks: Sequence[Task]) -> int:
    """
    1 + the highest id in the collection, or 1 when it is empty.

    Ids are NOT unique over the store's history: deleting the highest-id task
    and adding a new one hands out the same id again.
    """
    return max((t.id for t in tasks), default=0) + 1


def _clean_description(description: str) -> str:
    if not description or not description.strip():
        raise ValueError("description is required")
    return description.strip()


def append_todo(tasks: Sequence[Task], description: str) -> tuple[list[Task], Todo]:
    task = Todo(id=next_id(tasks), description=_clean_description(description))
    return [*tasks, task], task


def append_deadline(
    tasks: Sequence[Task], description: str, due_at: datetime
) -> tuple[list[Task], Deadline]:
    task = Deadline(id=next_id(tasks), description=_clean_description(description), due_at=due_at)
    return [*tasks, task], task


def append_event(
    tasks: Sequence[Task], description: str, start_at: datetime, end_at: datetime
) -> tuple[list[Task], Event]:
    task = Event(
        id=next_id(tasks),
        description=_clean_description(description),
        start_at=start_at,
        end_at=end_at,
    )
    if task.is_inverted:
        # Inverted ranges are stored as given.
        logger.warning(
            "Event id=%s ends before it starts start=%s end=%s", task.id, start_at, end_at
        )
    return [*tasks, task], task


def position_is_valid(tasks: Sequence[Task], pos: int) -> bool:
    return bool(tasks) and 1 <= pos <= len(tasks)


def set_completed(
    tasks: Sequence[Task], pos: int, completed: bool
) -> tuple[list[Task], Task | None]:
    """Returns the updated task, or None (and the list unchanged) for an invalid position."""
    if not position_is_valid(tasks, pos):
        return list(tasks), None
    updated = dataclasses.replace(tasks[pos - 1], completed=completed)
    new_tasks = list(tasks)
    new_tasks[pos - 1] = updated
    return new_tasks, updated


def remove_at(tasks: Sequence[Task], pos: int) -> tuple[list[Task], Task | None]:
    if not position_is_valid(tasks, pos):
        return list(tasks), None
    new_tasks = list(tasks)
    removed = new_tasks.pop(pos - 1)
    return new_tasks, removed


def filter_fuzzy(
    tasks: Sequence[Task], keyword: str, threshold: int = FUZZY_SEARCH_THRESHOLD
) -> list[Task]:
    return [t for t in tasks if is_fuzzy_match(t.description, keyword, threshold)]


# ---- engine ----


class TaskList:
    """
    CRUD + search over a TaskStorage.

    Positions are 1-based indexes into the current ordering, independent of task ids.
    Invalid positions are reported as None, never raised.

    Write failures:
    - strict_writes=True: logged and re-raised as TaskStoreWriteError
    - strict_writes=False: logged only; the caller still gets the result
    """

    def __init__(self, storage: TaskStorage, *, strict_writes: bool = True) -> None:
        self._storage = storage
        self._strict_writes = strict_writes
        self._lock = threading.Lock()
        # Fail at startup if the store is unreadable.
        total = len(self.list_tasks())
        logger.info("TaskList ready total=%s strict_writes=%s", total, strict_writes)

    # ---- low-level helpers ----

    def _save(self, tasks: list[Task]) -> None:
        try:
            self._storage.write(tasks)
        except TaskStoreWriteError:
            logger.exception("Failed to save %d tasks", len(tasks))
            if self._strict_writes:
                raise

    def _mutate(self, op: Callable[[list[Task]], tuple[list[Task], R]]) -> R:
        with self._lock:
            tasks = self._storage.read()
            new_tasks, result = op(tasks)
            if result is not None:
                self._save(new_tasks)
            return result

    # ---- public API ----

    @staticmethod
    def next_id(tasks: Sequence[Task]) -> int:
        return next_id(tasks)

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return self._storage.read()

    def size(self) -> int:
        return len(self.list_tasks())

    def is_valid_index(self, pos: int) -> bool:
        return position_is_valid(self.list_tasks(), pos)

    def add_todo(self, description: str) -> Todo:
        task = self._mutate(lambda tasks: append_todo(tasks, description))
        logger.debug("Todo added id=%s", task.id)
        return task

    def add_deadline(self, description: str, due_at: datetime) -> Deadline:
        task = self._mutate(lambda tasks: append_deadline(tasks, description, due_at))
        logger.debug("Deadline added id=%s due_at=%s", task.id, due_at)
        return task

    def add_event(self, description: str, start_at: datetime, end_at: datetime) -> Event:
        task = self._mutate(lambda tasks: append_event(tasks, description, start_at, end_at))
        logger.debug("Event added id=%s start=%s end=%s", task.id, start_at, end_at)
        return task

    def mark_as_done(self, pos: int) -> Task | None:
        return self._mutate(lambda tasks: set_completed(tasks, pos, True))

    def unmark_as_done(self, pos: int) -> Task | None:
        return self._mutate(lambda tasks: set_completed(tasks, pos, False))

    def delete_task(self, pos: int) -> Task | None:
        removed = self._mutate(lambda tasks: remove_at(tasks, pos))
        if removed is not None:
            logger.debug("Task deleted id=%s pos=%s", removed.id, pos)
        return removed

    def find_tasks(self, keyword: str) -> list[Task]:
        return filter_fuzzy(self.list_tasks(), keyword)
