# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry, CommandResult
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState, commands: CommandRegistry = command_registry) -> None:
    """
    Read-command loop: one line, one command, until quit or EOF.

    Blank lines are ignored. The quit command ends the process with SystemExit,
    which is deliberately not caught here.
    """
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    logger.debug("Console loop started (tasks=%d).", len(state.task_list))
    print(f"[{app_name}] Type 'help' for commands, 'quit' to exit.")

    while True:
        try:
            line = state.prompter.ask("\n> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        try:
            result = commands.handle(state, line, emit=print)
        except EOFError:
            logger.info("Console EOF inside a command, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt inside a command, exiting.")
            print()
            break
        except Exception:
            logger.exception("Command handler crashed.")
            result = CommandResult.failure("Internal error while handling a command.")

        if result is not None and result.message:
            print(result.message)

    logger.debug("Console loop finished.")
