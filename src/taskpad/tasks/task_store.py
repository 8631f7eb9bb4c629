# src/taskpad/tasks/task_store.py

"""
Backing-file persistence for the TaskList.

The whole list is rewritten after every mutating command (small files, single user).
Recoverable problems are logged and the app keeps running with what it has in memory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import TaskFileError
from .task_list import TaskList

logger = logging.getLogger(__name__)


def load_task_list(path: str | Path) -> TaskList:
    """
    Load the store from `path`.

    - missing file -> created as "[]", empty store
    - empty file or "[]" -> empty store
    - malformed contents -> error notice, empty store

    CorruptTaskFileError (unreadable date_created) is not caught here.
    """
    path = Path(path)

    if not path.exists():
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", "utf-8")
            logger.info("No saved tasks yet, created %s", path)
        except OSError as e:
            logger.error("Could not create file %s: %s", path, e)
        return TaskList()

    try:
        text = path.read_text("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read file %s: %s", path, e)
        return TaskList()

    try:
        task_list = TaskList.deserialize(text)
    except TaskFileError as e:
        logger.error("Could not parse %s (%s). Starting with an empty task list.", path, e)
        return TaskList()

    if not task_list:
        logger.info("No tasks saved in %s.", path)
    else:
        logger.info("Loaded %d tasks from %s", len(task_list), path)
    return task_list


def save_task_list(task_list: TaskList, path: str | Path) -> bool:
    """Rewrite `path` with the whole store. Returns False (and logs) on I/O errors."""
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(task_list.serialize(), "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        logger.error("Could not write to file %s: %s", path, e)
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not remove temp file %s", tmp)
        return False

    logger.info("Saved %d tasks to %s", len(task_list), path)
    return True
