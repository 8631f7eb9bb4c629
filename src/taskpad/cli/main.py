# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- runs a one-shot command (show [all], add, random), or
- prints the task list and starts the interactive console loop.
"""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.task_store import save_task_list
from .bootstrap import create_initial_state
from .render import format_detail, format_header, format_heading, format_task_list

logger = logging.getLogger(__name__)

ONE_SHOT_ALIASES = {
    "show": "show",
    "s": "show",
    "add": "add",
    "a": "add",
    "random": "random",
    "rand": "random",
    "r": "random",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskpad",
        description="Terminal task manager. Without a command, starts the interactive prompt.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=sorted(ONE_SHOT_ALIASES),
        metavar="command",
        help="one-shot command: show [all], add, random",
    )
    parser.add_argument("target", nargs="?", help="'all' for show")
    parser.add_argument("-f", "--file", help="tasks file (default: $TASKPAD_TASKS_FILE)")
    parser.add_argument("--log-level", help="console log level (default: $TASKPAD_LOG_LEVEL)")
    return parser


def show_summary(state: AppState) -> None:
    """High priority / urgent / random picks, one header each."""
    task_list = state.task_list
    if not task_list:
        return

    top = task_list.sorted_by_importance()[0].importance
    picks = (
        ("High priority", random.choice(task_list.filter_by_importance(top))),
        ("Urgent", task_list.sorted_by_due()[0]),
        ("Random", task_list.random_task()),
    )
    for heading, task in picks:
        if task is None:
            continue
        print(format_heading(heading))
        print(format_header(task.render_header()))
        print()


def run_one_shot(state: AppState, command: str, target: str | None = None) -> int:
    task_list = state.task_list

    if command == "show":
        if target is not None and target.lower() == "all":
            if task_list:
                print(format_task_list(task_list))
        else:
            show_summary(state)
        return 0

    if command == "add":
        task = state.prompter.prompt_new_task()
        task_list.add_task(task)
        save_task_list(task_list, state.settings.tasks_file)  # type: ignore[attr-defined]
        return 0

    if command == "random":
        task = task_list.random_task()
        if task is None:
            print("You have no tasks!")
        else:
            print("Random Task:")
            print(format_detail(task.render_detail()))
        return 0

    raise ValueError(f"Unknown one-shot command: {command}")


def run(state: AppState, command: str | None = None, target: str | None = None) -> int:
    if command is not None:
        return run_one_shot(state, ONE_SHOT_ALIASES[command], target)

    if state.task_list:
        print(format_task_list(state.task_list))
    run_console_loop(state)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.file:
        settings = settings.with_tasks_file(args.file)

    level_name = str(args.log_level or settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(
        log_dir=settings.data_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    logger.debug("Starting %s (file=%s)...", settings.app_name, settings.tasks_file)
    state = create_initial_state(settings=settings)

    try:
        return run(state, args.command, args.target)
    except (KeyboardInterrupt, EOFError):
        print()
        logger.info("Interrupted.")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
