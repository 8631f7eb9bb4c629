# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.errors import InputError, TaskError, TaskIndexError
from ..tasks.task_store import save_task_list
from .render import format_detail, format_info, format_task_list

CommandEmitter = Callable[[str], None]

logger = logging.getLogger(__name__)

FAREWELL = "Good luck with your tasks ;)"


@dataclass(frozen=True, slots=True)
class CommandResult:
    ok: bool
    message: str | None = None

    @classmethod
    def success(cls, message: str | None = None) -> CommandResult:
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str) -> CommandResult:
        return cls(ok=False, message=message)


CommandHandler = Callable[[AppState, str, CommandEmitter | None], CommandResult]


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    keywords: tuple[str, ...]
    handler: CommandHandler
    help_text: str
    arg_hint: str = ""
    # Mutating commands save the store after a successful run.
    mutating: bool = False


class CommandRegistry:
    """
    Ordered keyword -> command table used by the console loop.

    Keywords are case-insensitive and may belong to one command only.
    """

    def __init__(self) -> None:
        self._commands: list[Command] = []

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        arg_hint: str = "",
        mutating: bool = False,
    ) -> Command:
        aliases = aliases or []
        keywords = tuple(dict.fromkeys(k.lower() for k in [name, *aliases]))
        for kw in keywords:
            owner = self.find(kw)
            if owner is not None:
                raise ValueError(f"Keyword {kw!r} is already used by command {owner.name!r}")

        command = Command(
            name=name.lower(),
            keywords=keywords,
            handler=handler,
            help_text=help_text,
            arg_hint=arg_hint,
            mutating=mutating,
        )
        self._commands.append(command)
        return command

    def find(self, keyword: str) -> Command | None:
        keyword = keyword.lower()
        for command in self._commands:
            if keyword in command.keywords:
                return command
        return None

    def dispatch(
        self,
        state: AppState,
        keyword: str,
        arg: str = "",
        emit: CommandEmitter | None = None,
    ) -> CommandResult:
        command = self.find(keyword)
        if command is None:
            return CommandResult.failure(f"Unknown command: {keyword}")

        try:
            result = command.handler(state, arg, emit)
        except TaskError as e:
            logger.debug("Command %s %r failed: %s", command.name, arg, e)
            return CommandResult.failure(str(e))

        if result.ok and command.mutating:
            save_task_list(state.task_list, state.settings.tasks_file)  # type: ignore[attr-defined]
        return result

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> CommandResult | None:
        """
        Handle a line like "show 2": first word is the command, second the argument.
        Returns None for a blank line.
        """
        parts = line.split()
        if not parts:
            return None
        arg = parts[1] if len(parts) > 1 else ""
        return self.dispatch(state, parts[0].lower(), arg, emit=emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for command in self._commands:
            usage = ", ".join(command.keywords)
            if command.arg_hint:
                usage += f" {command.arg_hint}"
            lines.append(f"  {usage:<28} {command.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_index(arg: str) -> int:
    """Parse a 1-based id typed by the user; blank input is 0."""
    raw = arg.strip().rstrip(".")
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        raise InputError(f"Invalid id: {arg!r}!") from None


def cmd_add(state: AppState, arg: str, emit: CommandEmitter | None = None) -> CommandResult:
    """
    add     -> new top-level task (or a sub task of the focused task)
    add N   -> new sub task of task N
    """
    task_list = state.task_list

    if arg.strip():
        index = _parse_index(arg)
        try:
            parent = task_list.get(index)
        except TaskIndexError as e:
            if e.upper == 0:
                raise
            return CommandResult.failure(f"Id must be between 1 and {e.upper}!")
    elif task_list.last_shown is not None:
        parent = task_list.last_shown
    else:
        task = state.prompter.prompt_new_task()
        task_list.add_task(task)
        return CommandResult.success(f"Added task {task.title!r}.")

    task = state.prompter.prompt_new_task()
    parent.add_sub_task(task)
    return CommandResult.success(f"Added sub task {task.title!r} to {parent.title!r}.")


def cmd_edit(state: AppState, arg: str, emit: CommandEmitter | None = None) -> CommandResult:
    raw = arg if arg.strip() else state.prompter.ask("Task id: ")
    task = state.task_list.get(_parse_index(raw))
    task.apply_edit(state.prompter.prompt_edit(task))
    return CommandResult.success(f"Edited task {task.title!r}.")


def cmd_show(state: AppState, arg: str, emit: CommandEmitter | None = None) -> CommandResult:
    """
    show    -> list all tasks, clear focus
    show N  -> details of task N and focus it; while focused, N is a sub task id
    """
    task_list = state.task_list
    if not task_list:
        return CommandResult.failure("No tasks to show!")

    if not arg.strip():
        task_list.clear_focus()
        return CommandResult.success(format_task_list(task_list))

    index = _parse_index(arg)
    focus = task_list.focus
    if focus is None:
        task = task_list.set_focus(index)
    else:
        task = task_list.get_sub(focus, index)
    return CommandResult.success(format_detail(task.render_detail()))


def cmd_info(state: AppState, arg: str, emit: CommandEmitter | None = None) -> CommandResult:
    task = state.task_list.set_focus(_parse_index(arg))
    return CommandResult.success(format_info(task.render_info()))


def cmd_remove(state: AppState, arg: str, emit: CommandEmitter | None = None) -> CommandResult:
    task_list = state.task_list
    index = _parse_index(arg)

    # While task N is shown, "remove N" addresses sub task N of it.
    focus = task_list.focus
    if focus is not None and focus == index:
        parent = task_list.get(focus)
        removed = task_list.remove_sub(focus, index)
        return CommandResult.success(
            f"Removed sub task {removed.title!r} from {parent.title!r}."
        )

    removed = task_list.remove(index)
    return CommandResult.success(f"Removed task {removed.title!r}.")


def cmd_sort(state: AppState, arg: str, emit: CommandEmitter | None = None) -> CommandResult:
    """
    sort               -> by creation date
    sort created|c     -> by creation date
    sort due|d         -> by due date, undated last
    sort importance|i  -> most important first
    """
    task_list = state.task_list
    kind = arg.strip().lower()

    if kind in ("", "created", "c"):
        task_list.sort_by_date_created()
        label = "creation date"
    elif kind in ("due", "d"):
        task_list.sort_by_due()
        label = "due date"
    elif kind in ("importance", "i"):
        task_list.sort_by_importance()
        label = "importance"
    else:
        raise InputError(f"Invalid sort type: {arg}! Use created|c, due|d or importance|i.")

    message = f"Sorted by {label}."
    if task_list:
        message += "\n" + format_task_list(task_list)
    return CommandResult.success(message)


def cmd_help(state: AppState, arg: str, emit: CommandEmitter | None = None) -> CommandResult:
    return CommandResult.success(registry.build_help())


def cmd_quit(state: AppState, arg: str, emit: CommandEmitter | None = None) -> CommandResult:
    (emit or print)(FAREWELL)
    raise SystemExit(0)


registry.register(
    "add",
    cmd_add,
    help_text="Add a task, or a sub task of task N / of the shown task.",
    aliases=["a"],
    arg_hint="[N]",
    mutating=True,
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit task N (blank answers keep current values).",
    aliases=["e"],
    arg_hint="[N]",
    mutating=True,
)
registry.register(
    "show",
    cmd_show,
    help_text="List all tasks, or show task N (then N addresses its sub tasks).",
    aliases=["s", "ls"],
    arg_hint="[N]",
)
registry.register(
    "info", cmd_info, help_text="Show every field of task N.", aliases=["i"], arg_hint="N"
)
registry.register(
    "remove",
    cmd_remove,
    help_text="Remove task N (sub task N while task N is shown).",
    aliases=["rm", "del"],
    arg_hint="N",
    mutating=True,
)
registry.register(
    "sort",
    cmd_sort,
    help_text="Sort tasks: created|c (default), due|d, importance|i.",
    arg_hint="[TYPE]",
    mutating=True,
)
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("quit", cmd_quit, help_text="Exit the program.", aliases=["exit", "q"])
