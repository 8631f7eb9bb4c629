# src/taskpad/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task-related errors reported to the user."""


class InputError(TaskError, ValueError):
    """Malformed user input (non-numeric id, unknown sort type, ...)."""


class TaskIndexError(TaskError, IndexError):
    """
    A 1-based id outside of the addressed list.

    `upper` is the last valid id (0 when the list is empty).
    `parent` names the task whose sub tasks were addressed, if any.
    """

    def __init__(self, index: int, upper: int, parent: str | None = None) -> None:
        self.index = index
        self.upper = upper
        self.parent = parent
        if index < 1:
            msg = "Id must be positive!"
        elif parent is not None:
            if upper == 0:
                msg = f"{parent!r} has no sub tasks!"
            else:
                msg = f"Last sub task id of {parent!r} is {upper}!"
        elif upper == 0:
            msg = "No tasks yet!"
        else:
            msg = f"Last id is {upper}!"
        super().__init__(msg)


class TaskFileError(TaskError):
    """The tasks file exists but its contents are not a valid task list."""


class CorruptTaskFileError(TaskError):
    """A value this program wrote itself can no longer be read back."""
