# src/orion_tasks/tasks/task_api.py

from __future__ import annotations

from collections.abc import Sequence

from .task_list import TaskList
from .task_models import Task

EMPTY_LIST_TEXT = "There are no tasks."
LIST_HEADER_TEXT = "Here are the tasks in your list:"


def format_task_line(pos: int, task: Task) -> str:
    return f"{pos}. {task}"


def render_task_list(tasks: Sequence[Task]) -> str:
    """
    Text block for the presentation layer: a header and one numbered line per task.
    Numbers are positions (1-based), not task ids.
    """
    if not tasks:
        return EMPTY_LIST_TEXT
    lines = [LIST_HEADER_TEXT]
    lines.extend(format_task_line(i, t) for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)


def render_task_list_for(task_list: TaskList) -> str:
    return render_task_list(task_list.list_tasks())
