# src/taskpad/tasks/task_list.py

from __future__ import annotations

import json
import logging
import random
from collections.abc import Iterator

from .errors import TaskFileError, TaskIndexError
from .task_models import Task

logger = logging.getLogger(__name__)


def _check_index(index: int, upper: int, parent: str | None = None) -> int:
    """Validate a 1-based id against a list of `upper` items; return the 0-based index."""
    if index < 1 or index > upper:
        raise TaskIndexError(index, upper, parent)
    return index - 1


class TaskList:
    """
    The in-memory store: ordered top-level tasks plus the focus cursor.

    Every id accepted or reported by this class is 1-based.

    Focus rules:
    - set by `set_focus` (show/info with an explicit id), cleared by `clear_focus`
    - removing the focused task clears it, removing an earlier task shifts it down
    - any sort clears it, since positions change
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: list[Task] = list(tasks) if tasks else []
        self._focus: int | None = None

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # ---- focus ----

    @property
    def focus(self) -> int | None:
        """1-based id of the focused task, or None."""
        return None if self._focus is None else self._focus + 1

    @property
    def last_shown(self) -> Task | None:
        return None if self._focus is None else self.tasks[self._focus]

    def set_focus(self, index: int) -> Task:
        self._focus = _check_index(index, len(self.tasks))
        return self.tasks[self._focus]

    def clear_focus(self) -> None:
        self._focus = None

    # ---- mutation / lookup ----

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)

    def add_sub_task(self, parent_index: int, task: Task) -> Task:
        parent = self.get(parent_index)
        parent.add_sub_task(task)
        return parent

    def get(self, index: int) -> Task:
        return self.tasks[_check_index(index, len(self.tasks))]

    def get_sub(self, parent_index: int, sub_index: int) -> Task:
        parent = self.get(parent_index)
        return parent.sub_tasks[_check_index(sub_index, len(parent.sub_tasks), parent.title)]

    def remove(self, index: int) -> Task:
        i = _check_index(index, len(self.tasks))
        removed = self.tasks.pop(i)
        if self._focus is not None:
            if self._focus == i:
                self._focus = None
            elif self._focus > i:
                self._focus -= 1
        logger.debug("Removed task %d %r (focus=%s)", index, removed.title, self.focus)
        return removed

    def remove_sub(self, parent_index: int, sub_index: int) -> Task:
        parent = self.get(parent_index)
        i = _check_index(sub_index, len(parent.sub_tasks), parent.title)
        return parent.sub_tasks.pop(i)

    # ---- ordering ----
    # list.sort is stable, so ties keep their current relative order.

    def sorted_by_date_created(self) -> list[Task]:
        return sorted(self.tasks, key=lambda t: t.date_created)

    def sorted_by_due(self) -> list[Task]:
        """Ascending due date; tasks without one go last."""
        return sorted(
            self.tasks,
            key=lambda t: (t.due_date is None, t.due_date.timestamp() if t.due_date else 0.0),
        )

    def sorted_by_importance(self) -> list[Task]:
        return sorted(self.tasks, key=lambda t: t.importance, reverse=True)

    def sort_by_date_created(self) -> None:
        self.tasks = self.sorted_by_date_created()
        self._focus = None

    def sort_by_due(self) -> None:
        self.tasks = self.sorted_by_due()
        self._focus = None

    def sort_by_importance(self) -> None:
        self.tasks = self.sorted_by_importance()
        self._focus = None

    # ---- queries ----

    def random_task(self) -> Task | None:
        if not self.tasks:
            return None
        return random.choice(self.tasks)

    def filter_by_importance(self, level: int) -> list[Task]:
        return [t for t in self.tasks if t.importance == level]

    # ---- serialization ----

    def serialize(self) -> str:
        return json.dumps([t.to_record() for t in self.tasks], ensure_ascii=False, indent=2)

    @classmethod
    def deserialize(cls, text: str) -> TaskList:
        """
        Build a TaskList from the JSON text written by `serialize`.

        Blank text is an empty list. Raises TaskFileError for malformed contents
        and CorruptTaskFileError for unreadable creation dates.
        """
        if not text.strip():
            return cls()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise TaskFileError(f"Invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise TaskFileError(f"Expected a list of tasks, got {type(data).__name__}")
        return cls([Task.from_record(raw) for raw in data])
