# src/orion_tasks/core/ports.py

"""
Ports (interfaces) used by the engine.

The engine depends on a Protocol instead of the concrete CSV store.
This keeps the storage swappable and lets tests inject an in-memory store.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """Whole-collection storage: read everything, overwrite everything."""

    def read(self) -> list[Task]: ...

    def write(self, tasks: Sequence[Task]) -> None: ...
