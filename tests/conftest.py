# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_list import TaskList

from .fakes import FakePrompter, make_task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad",
        log_level="INFO",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_file=tmp_path / "saved_stuff.json",
    )


@pytest.fixture()
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture()
def state(settings: SimpleNamespace, prompter: FakePrompter) -> AppState:
    """AppState with an empty store and a scripted prompter."""
    return AppState(settings=settings, task_list=TaskList(), prompter=prompter)


@pytest.fixture()
def three_tasks(state: AppState) -> AppState:
    """State holding "Buy milk", "Write report", "Call mom" in creation order."""
    for n, title in enumerate(["Buy milk", "Write report", "Call mom"]):
        state.task_list.add_task(make_task(title, created_offset=n))
    return state
