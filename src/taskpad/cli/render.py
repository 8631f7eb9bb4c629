# src/taskpad/cli/render.py

"""Terminal formatting of task display data.

Decisions:
- Colors disable automatically when stdout is not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Importance colors the title; due urgency colors the "[due in ...]" label.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from datetime import datetime

from ..core.dates import current_time
from ..tasks.task_models import (
    DueUrgency,
    ImportanceLevel,
    Task,
    TaskDetail,
    TaskHeader,
    TaskInfo,
)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR


def _code(part: str) -> str:
    """ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ""


RESET = _code("0")
BOLD = _code("1")
DIM = _code("2")
UNDERLINE = _code("4")

RED = _code("31")
YELLOW = _code("33")
CYAN = _code("36")
WHITE = _code("37")
GRAY = _code("90")

IMPORTANCE_STYLE: dict[ImportanceLevel, str] = {
    ImportanceLevel.HIGH: BOLD + RED,
    ImportanceLevel.MEDIUM: BOLD + YELLOW,
    ImportanceLevel.LOW: BOLD + CYAN,
    ImportanceLevel.NONE: "",
}

URGENCY_STYLE: dict[DueUrgency, str] = {
    DueUrgency.CRITICAL: BOLD + RED,
    DueUrgency.WARNING: YELLOW,
    DueUrgency.NORMAL: GRAY,
}

LABEL_STYLE = BOLD + WHITE
ID_STYLE = BOLD
HEADING_STYLE = BOLD + UNDERLINE + WHITE


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    style = "".join(styles)
    if not _ENABLE or not style:
        return text
    return style + text + RESET


def format_header(header: TaskHeader) -> str:
    out = color(header.title, IMPORTANCE_STYLE[header.level])
    if header.due_label is not None:
        style = URGENCY_STYLE[header.urgency] if header.urgency else ""
        out += "  " + color(f"[due in {header.due_label}]", style)
    return out


def format_detail(detail: TaskDetail) -> str:
    lines = [format_header(detail.header)]
    if detail.description:
        lines.append(detail.description)
    if detail.sub_tasks:
        lines.append(color(f"Sub tasks ({len(detail.sub_tasks)}):", LABEL_STYLE))
        for n, sub in enumerate(detail.sub_tasks, start=1):
            lines.append(f"  {color(f'{n}.', ID_STYLE)} {format_header(sub)}")
    return "\n".join(lines)


def format_info(info: TaskInfo) -> str:
    rows = (
        ("Title", info.title),
        ("Description", info.description),
        ("Importance", str(info.importance)),
        ("Date created", info.date_created),
        ("Date due", info.due_date),
        ("Sub tasks", str(info.sub_task_count)),
    )
    return "\n".join(f"{color(label + ':', LABEL_STYLE)} {value}" for label, value in rows)


def format_task_list(tasks: Iterable[Task], now: datetime | None = None) -> str:
    """Numbered header lines, one per task."""
    if now is None:
        now = current_time()
    return "\n".join(
        f"{color(f'{n}.', ID_STYLE)} {format_header(t.render_header(now))}"
        for n, t in enumerate(tasks, start=1)
    )


def format_heading(text: str) -> str:
    return color(text, HEADING_STYLE) + ":"
