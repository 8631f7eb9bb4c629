# src/taskpad/cli/prompts.py

"""Interactive field collection for the add/edit commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.dates import DATE_HINT, InvalidDateError, parse_due
from ..tasks.task_models import IMPORTANCE_MAX, Task, TaskEdit

logger = logging.getLogger(__name__)


class ConsolePrompter:
    """
    Prompter backed by stdin/stdout.

    Each field is re-asked until it is valid, so the returned values never
    need further checks.
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    def ask(self, prompt: str) -> str:
        return self._read(prompt).strip()

    def _ask_title(self, default: str | None = None) -> str:
        while True:
            title = self.ask("Title*: ")
            if title:
                return title
            if default:
                return default
            self._write("Title cannot be empty!")

    def _ask_importance(self, default: int) -> int:
        while True:
            raw = self.ask("Importance: ")
            if not raw:
                return default
            try:
                value = int(raw)
            except ValueError:
                value = -1
            if 0 <= value <= IMPORTANCE_MAX:
                return value
            self._write(f"Importance must be a number between 0 and {IMPORTANCE_MAX}!")

    def _ask_due(self, default: datetime | None) -> datetime | None:
        while True:
            raw = self.ask("Due date: ")
            if not raw:
                return default
            try:
                return parse_due(raw)
            except InvalidDateError:
                logger.debug("Rejected due date %r", raw)
                self._write(DATE_HINT)

    def prompt_new_task(self) -> Task:
        title = self._ask_title()
        description = self.ask("Description: ") or None
        importance = self._ask_importance(0)
        due_date = self._ask_due(None)
        return Task(title=title, description=description, importance=importance, due_date=due_date)

    def prompt_edit(self, task: Task) -> TaskEdit:
        self._write(f"Editing task: {task.title}\n(Press enter to leave unchanged)")
        title = self._ask_title(task.title)
        description = self.ask("Description: ") or task.description
        importance = self._ask_importance(task.importance)
        due_date = self._ask_due(task.due_date)
        return TaskEdit(
            title=title, description=description, importance=importance, due_date=due_date
        )
