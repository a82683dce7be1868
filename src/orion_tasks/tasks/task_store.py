# src/orion_tasks/tasks/task_store.py

from __future__ import annotations

import contextlib
import csv
import logging
import os
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import assert_never

from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

EVENT_RANGE_SEPARATOR = "|"

_FIELD_COUNTS = {
    TaskKind.TODO: 4,
    TaskKind.DEADLINE: 5,
    TaskKind.EVENT: 5,
}


class TaskStoreError(Exception):
    """Base class for storage failures."""


class TaskStoreInitError(TaskStoreError):
    """The store exists but cannot be read or parsed."""


class TaskStoreWriteError(TaskStoreError):
    """The store could not be rewritten."""


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_bool(raw: str) -> bool:
    val = raw.strip().lower()
    if val == "true":
        return True
    if val == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def task_to_row(task: Task) -> list[str]:
    """
    Serialize one task into storage columns:
      id, TAG, description, completed[, temporal]
    """
    match task:
        case Todo():
            temporal: list[str] = []
        case Deadline(due_at=due_at):
            temporal = [due_at.isoformat()]
        case Event(start_at=start_at, end_at=end_at):
            temporal = [f"{start_at.isoformat()}{EVENT_RANGE_SEPARATOR}{end_at.isoformat()}"]
        case _:
            raise TypeError(f"Unknown task type: {type(task).__name__}")

    return [str(task.id), task.kind.value, task.description, format_bool(task.completed), *temporal]


def row_to_task(row: Sequence[str]) -> Task:
    """Inverse of task_to_row. Raises ValueError on any malformed column."""
    if len(row) < 4:
        raise ValueError(f"expected at least 4 fields, got {len(row)}")

    kind = TaskKind(row[1].strip())
    expected = _FIELD_COUNTS[kind]
    if len(row) != expected:
        raise ValueError(f"{kind.value} row needs {expected} fields, got {len(row)}")

    task_id = int(row[0])
    if task_id <= 0:
        raise ValueError(f"task id must be positive, got {task_id}")
    description = row[2]
    if not description.strip():
        raise ValueError("description is empty")
    completed = parse_bool(row[3])

    match kind:
        case TaskKind.TODO:
            return Todo(id=task_id, description=description, completed=completed)
        case TaskKind.DEADLINE:
            return Deadline(
                id=task_id,
                description=description,
                completed=completed,
                due_at=datetime.fromisoformat(row[4].strip()),
            )
        case TaskKind.EVENT:
            start_raw, sep, end_raw = row[4].partition(EVENT_RANGE_SEPARATOR)
            if not sep:
                raise ValueError(f"event range is missing {EVENT_RANGE_SEPARATOR!r}")
            return Event(
                id=task_id,
                description=description,
                completed=completed,
                start_at=datetime.fromisoformat(start_raw.strip()),
                end_at=datetime.fromisoformat(end_raw.strip()),
            )
        case _:
            assert_never(kind)


class CsvTaskStore:
    """
    Flat-file task store: one comma-separated record per line, no header.

    Persistence contract:
    - read() returns the whole collection in file order
    - write() replaces the whole file (temp file + os.replace)

    Descriptions containing the delimiter are quoted by the csv module;
    every other row is written unquoted.
    """

    def __init__(self, path: str | Path = "data/tasks.csv") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("CsvTaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> list[Task]:
        if not self._path.exists():
            return []

        tasks: list[Task] = []
        try:
            with self._path.open("r", encoding="utf-8", newline="") as f:
                reader = csv.reader(f)
                for row in reader:
                    if not row or all(not col.strip() for col in row):
                        continue
                    try:
                        tasks.append(row_to_task(row))
                    except ValueError as e:
                        raise TaskStoreInitError(
                            f"Malformed task record in {self._path} line {reader.line_num}: {e}"
                        ) from e
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise TaskStoreInitError(f"Cannot read task store {self._path}: {e}") from e

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def write(self, tasks: Sequence[Task]) -> None:
        rows = [task_to_row(t) for t in tasks]

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerows(rows)
            os.replace(tmp, self._path)
        except (OSError, UnicodeError, csv.Error) as e:
            # The previous file is untouched; drop the half-written temp file.
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStoreWriteError(f"Cannot write task store {self._path}: {e}") from e

        logger.debug("Saved %d tasks to %s", len(rows), self._path)
