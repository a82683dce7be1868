# src/orion_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

# Human-readable timestamp format used in task textual forms.
DISPLAY_FORMAT = "%b %d %Y, %I:%M %p"


class TaskKind(StrEnum):
    """
    Variant tag of a task.

    The value is exactly what gets written into the second column of a storage row.
    """

    TODO = "TODO"
    DEADLINE = "DEADLINE"
    EVENT = "EVENT"

    @property
    def icon(self) -> str:
        return self.value[0]


@dataclass(slots=True)
class _TaskBase:
    id: int
    description: str
    completed: bool = False

    kind: ClassVar[TaskKind]

    def _prefix(self) -> str:
        status = "X" if self.completed else " "
        return f"[{self.kind.icon}][{status}] {self.description}"


@dataclass(slots=True)
class Todo(_TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.TODO

    def __str__(self) -> str:
        return self._prefix()


@dataclass(slots=True)
class Deadline(_TaskBase):
    due_at: datetime = field(kw_only=True)

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def __str__(self) -> str:
        return f"{self._prefix()} (by: {self.due_at.strftime(DISPLAY_FORMAT)})"


@dataclass(slots=True)
class Event(_TaskBase):
    start_at: datetime = field(kw_only=True)
    end_at: datetime = field(kw_only=True)

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    @property
    def is_inverted(self) -> bool:
        """True when the range ends before it starts (accepted, but suspicious)."""
        return self.start_at > self.end_at

    def __str__(self) -> str:
        return (
            f"{self._prefix()} "
            f"(from: {self.start_at.strftime(DISPLAY_FORMAT)} "
            f"to: {self.end_at.strftime(DISPLAY_FORMAT)})"
        )


# Closed set of task variants. Storage and engine code match on exactly these three.
Task = Todo | Deadline | Event
