# src/orion_tasks/bootstrap.py

"""
Composition root:
- loads settings once (or takes injected ones),
- ensures the local data directory exists,
- wires the CSV store into a TaskList.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import get_settings
from .logging_setup import setup_logging
from .tasks.task_list import TaskList
from .tasks.task_store import CsvTaskStore

logger = logging.getLogger(__name__)


def create_task_list(*, settings=None, configure_logging: bool = False) -> TaskList:
    """
    Build a TaskList backed by settings.tasks_path.

    Keeping settings injectable gives each test run its own storage file.
    If settings is None, falls back to get_settings().
    Raises TaskStoreInitError if the existing store cannot be parsed.
    """
    if settings is None:
        settings = get_settings()

    data_dir = Path(settings.data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    if configure_logging:
        level_name = str(getattr(settings, "log_level", "INFO")).upper()
        setup_logging(
            log_dir=data_dir,
            log_name=getattr(settings, "app_name", "orion"),
            console_level=getattr(logging, level_name, logging.INFO),
        )

    store = CsvTaskStore(settings.tasks_path)
    task_list = TaskList(store, strict_writes=bool(getattr(settings, "strict_writes", True)))
    logger.info("Task engine wired path=%s", store.path)
    return task_list
