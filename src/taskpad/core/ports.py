# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the commands.

Commands depend on Protocols instead of concrete console code.
This keeps interactive input swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskEdit


class Prompter(Protocol):
    """Collects task fields from the operator."""

    def ask(self, prompt: str) -> str:
        """Read one line (stripped); empty string when the operator just presses enter."""
        ...

    def prompt_new_task(self) -> Task:
        """Return a fully validated new task."""
        ...

    def prompt_edit(self, task: Task) -> TaskEdit:
        """Return new field values; blank answers keep the task's current values."""
        ...
