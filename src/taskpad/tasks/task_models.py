# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import StrEnum
from typing import Any

from ..core.dates import current_time, format_timestamp, parse_timestamp, time_left
from .errors import CorruptTaskFileError, TaskFileError

IMPORTANCE_MAX = 3

# Stored in place of a missing description / due date.
NONE_SENTINEL = "None"


class ImportanceLevel(StrEnum):
    """Display class derived from a task's importance rank."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_importance(cls, importance: int) -> ImportanceLevel:
        if importance >= 3:
            return cls.HIGH
        if importance == 2:
            return cls.MEDIUM
        if importance == 1:
            return cls.LOW
        return cls.NONE


class DueUrgency(StrEnum):
    """Display class derived from the time left until the due date."""

    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"

    @classmethod
    def from_remaining(cls, remaining: timedelta) -> DueUrgency:
        if remaining < timedelta(days=1):
            return cls.CRITICAL
        if remaining < timedelta(weeks=1):
            return cls.WARNING
        return cls.NORMAL


@dataclass(frozen=True, slots=True)
class TaskHeader:
    title: str
    level: ImportanceLevel
    due_label: str | None = None
    urgency: DueUrgency | None = None


@dataclass(frozen=True, slots=True)
class TaskDetail:
    header: TaskHeader
    description: str | None
    sub_tasks: tuple[TaskHeader, ...] = ()


@dataclass(frozen=True, slots=True)
class TaskInfo:
    title: str
    description: str
    importance: int
    date_created: str
    due_date: str
    sub_task_count: int


@dataclass(frozen=True, slots=True)
class TaskEdit:
    """New field values produced by the edit prompt."""

    title: str
    description: str | None
    importance: int
    due_date: datetime | None


@dataclass(slots=True)
class Task:
    """
    A unit of work.

    Values are not validated here: the prompts enforce a non-empty title and
    an importance within 0..IMPORTANCE_MAX before a Task is built.
    """

    title: str
    description: str | None = None
    importance: int = 0
    due_date: datetime | None = None
    date_created: datetime = field(default_factory=current_time)
    sub_tasks: list[Task] = field(default_factory=list)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "date_created" and hasattr(self, "date_created"):
            raise AttributeError("date_created is set once at construction")
        object.__setattr__(self, name, value)

    def add_sub_task(self, task: Task) -> None:
        self.sub_tasks.append(task)

    def apply_edit(self, edit: TaskEdit) -> None:
        """Replace the editable fields; date_created and sub_tasks are kept."""
        self.title = edit.title
        self.description = edit.description
        self.importance = edit.importance
        self.due_date = edit.due_date

    # ---- display data ----

    def render_header(self, now: datetime | None = None) -> TaskHeader:
        level = ImportanceLevel.from_importance(self.importance)
        if self.due_date is None:
            return TaskHeader(title=self.title, level=level)

        if now is None:
            now = current_time()
        return TaskHeader(
            title=self.title,
            level=level,
            due_label=time_left(self.due_date, now),
            urgency=DueUrgency.from_remaining(self.due_date - now),
        )

    def render_detail(self, now: datetime | None = None) -> TaskDetail:
        if now is None:
            now = current_time()
        return TaskDetail(
            header=self.render_header(now),
            description=self.description or None,
            sub_tasks=tuple(t.render_header(now) for t in self.sub_tasks),
        )

    def render_info(self) -> TaskInfo:
        return TaskInfo(
            title=self.title,
            description=self.description if self.description else NONE_SENTINEL,
            importance=self.importance,
            date_created=format_timestamp(self.date_created),
            due_date=format_timestamp(self.due_date) if self.due_date else NONE_SENTINEL,
            sub_task_count=len(self.sub_tasks),
        )

    # ---- JSON records ----

    def to_record(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description if self.description is not None else NONE_SENTINEL,
            "importance": self.importance,
            "due_date": format_timestamp(self.due_date) if self.due_date else NONE_SENTINEL,
            "date_created": format_timestamp(self.date_created),
            "sub_tasks": [t.to_record() for t in self.sub_tasks],
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise TaskFileError(f"Task record must be an object, got {type(raw).__name__}")

        title = raw.get("title")
        if not isinstance(title, str):
            raise TaskFileError("Task record has no title")

        description = raw.get("description", NONE_SENTINEL)
        if not isinstance(description, str):
            raise TaskFileError(f"Task {title!r}: description must be a string")

        importance = raw.get("importance", 0)
        # bool is an int subclass, reject it explicitly.
        if (
            not isinstance(importance, int)
            or isinstance(importance, bool)
            or not 0 <= importance <= IMPORTANCE_MAX
        ):
            raise TaskFileError(
                f"Task {title!r}: importance must be between 0 and {IMPORTANCE_MAX}"
            )

        due_raw = raw.get("due_date", NONE_SENTINEL)
        if not isinstance(due_raw, str):
            raise TaskFileError(f"Task {title!r}: due_date must be a string")
        due_date = None
        if due_raw != NONE_SENTINEL:
            try:
                due_date = parse_timestamp(due_raw)
            except ValueError as e:
                raise TaskFileError(f"Task {title!r}: invalid due_date {due_raw!r}") from e

        created_raw = raw.get("date_created")
        if not isinstance(created_raw, str):
            raise TaskFileError(f"Task {title!r}: date_created is missing")
        try:
            date_created = parse_timestamp(created_raw)
        except ValueError as e:
            raise CorruptTaskFileError(
                f"Task {title!r}: unreadable date_created {created_raw!r}"
            ) from e

        subs_raw = raw.get("sub_tasks", [])
        if not isinstance(subs_raw, list):
            raise TaskFileError(f"Task {title!r}: sub_tasks must be a list")

        return cls(
            title=title,
            description=None if description == NONE_SENTINEL else description,
            importance=importance,
            due_date=due_date,
            date_created=date_created,
            sub_tasks=[cls.from_record(s) for s in subs_raw],
        )
