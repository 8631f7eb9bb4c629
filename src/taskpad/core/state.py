# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import Prompter


@dataclass(slots=True)
class AppState:
    # Settings object (config.Settings in the app, SimpleNamespace in tests).
    settings: object

    task_list: TaskList
    prompter: Prompter
