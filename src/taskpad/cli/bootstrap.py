# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings (injected, or loaded once),
- loads the task list from the backing file,
- wires the console prompter into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Prompter
from ..core.state import AppState
from ..tasks.task_store import load_task_list
from .prompts import ConsolePrompter

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, prompter: Prompter | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    task_list = load_task_list(settings.tasks_file)
    logger.debug("State ready (file=%s, tasks=%d).", settings.tasks_file, len(task_list))

    return AppState(
        settings=settings,
        task_list=task_list,
        prompter=prompter if prompter is not None else ConsolePrompter(),
    )
