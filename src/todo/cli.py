#!/usr/bin/env python3
"""
Interactive todo console. Reads one command per line from stdin.

Usage:
    python -m src.todo [--config PATH] [--format text|json] [--log-level LEVEL] [--log-file PATH | --no-log-file]

Type ``help`` in the console for the command list.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

from .config import Config
from .logger import setup_logger
from .models import TodoItem
from .store import TodoStore
from .view import TodoListView, format_todo_row

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}

COMMANDS_HELP = """\
Commands:
    list
    add NAME [--priority P]
    edit INDEX [--name NAME] [--priority P] [--completed | --not-completed]
    toggle INDEX
    move INDEX [INDEX ...] --to POSITION
    delete INDEX [INDEX ...]
    help
    quit"""


class CommandError(Exception):
    """Raised for a console line that cannot be parsed or executed."""


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the process."""

    def error(self, message: str):
        raise CommandError(message)


def build_command_parser(default_priority: str) -> CommandParser:
    parser = CommandParser(prog="", add_help=False)
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", add_help=False)
    subparsers.add_parser("help", add_help=False)

    parser_add = subparsers.add_parser("add", add_help=False)
    parser_add.add_argument("name")
    parser_add.add_argument("--priority", default=default_priority)

    parser_edit = subparsers.add_parser("edit", add_help=False)
    parser_edit.add_argument("index", type=int)
    parser_edit.add_argument("--name")
    parser_edit.add_argument("--priority")
    completed = parser_edit.add_mutually_exclusive_group()
    completed.add_argument("--completed", dest="completed", action="store_const", const=True)
    completed.add_argument("--not-completed", dest="completed", action="store_const", const=False)

    parser_toggle = subparsers.add_parser("toggle", add_help=False)
    parser_toggle.add_argument("index", type=int)

    parser_move = subparsers.add_parser("move", add_help=False)
    parser_move.add_argument("indices", type=int, nargs="+")
    parser_move.add_argument("--to", dest="to_index", type=int, required=True)

    parser_delete = subparsers.add_parser("delete", add_help=False)
    parser_delete.add_argument("indices", type=int, nargs="+")

    return parser


class TodoSession:
    """Console front end driving a :class:`TodoStore` through a list view."""

    def __init__(
        self,
        store: TodoStore,
        output_format: str = "text",
        default_priority: str = "P1",
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.store = store
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.view = TodoListView(store, output_format=output_format, on_change=self._print)
        self.parser = build_command_parser(default_priority)
        self.handlers: Dict[str, Callable[[argparse.Namespace], None]] = {
            "list": self.cmd_list,
            "help": self.cmd_help,
            "add": self.cmd_add,
            "edit": self.cmd_edit,
            "toggle": self.cmd_toggle,
            "move": self.cmd_move,
            "delete": self.cmd_delete,
        }

    def _print(self, text: str) -> None:
        print(text, file=self.stdout)

    def _error(self, message: str) -> None:
        print(f"Error: {message}", file=self.stderr)

    def cmd_list(self, args: argparse.Namespace) -> None:
        self._print(self.view.render())

    def cmd_help(self, args: argparse.Namespace) -> None:
        self._print(COMMANDS_HELP)

    def cmd_add(self, args: argparse.Namespace) -> None:
        self.store.append(TodoItem.create(args.name, priority=args.priority))

    def cmd_edit(self, args: argparse.Namespace) -> None:
        draft = self.view.begin_edit(args.index)
        if args.name is not None:
            draft.name = args.name
        if args.priority is not None:
            draft.priority = args.priority
        if args.completed is not None:
            draft.completed = args.completed
        self._save(draft)

    def cmd_toggle(self, args: argparse.Namespace) -> None:
        draft = self.view.begin_edit(args.index)
        draft.completed = not draft.completed
        self._save(draft)

    def cmd_move(self, args: argparse.Namespace) -> None:
        self.store.move(args.indices, args.to_index)

    def cmd_delete(self, args: argparse.Namespace) -> None:
        removed = self.store.delete(args.indices)
        for todo in removed:
            logger.debug("Deleted todo: %s", format_todo_row(todo))

    def _save(self, draft) -> None:
        if not self.view.save(draft):
            raise CommandError(f"todo {draft.id} no longer exists")

    def execute(self, line: str) -> bool:
        """Run one console line. Returns False when the session should end."""
        try:
            tokens = shlex.split(line)
        except ValueError as exc:
            self._error(str(exc))
            return True
        if not tokens:
            return True
        if tokens[0] in QUIT_COMMANDS:
            return False

        try:
            args = self.parser.parse_args(tokens)
            self.handlers[args.command](args)
        except (CommandError, IndexError) as exc:
            self._error(str(exc))
        return True

    def run(self, stdin: TextIO) -> int:
        for line in stdin:
            if not self.execute(line):
                break
        self.view.close()
        return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="In-memory todo list console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=COMMANDS_HELP,
    )
    parser.add_argument("--config", type=Path, help="YAML settings file (default: config/app_config.yaml)")
    parser.add_argument("--format", choices=["text", "json"], help="list output format")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    log_target = parser.add_mutually_exclusive_group()
    log_target.add_argument("--log-file", help="log file path")
    log_target.add_argument("--no-log-file", action="store_true", help="log to stderr only")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Console entry point"""
    args = build_arg_parser().parse_args(argv)
    config = Config.from_yaml(args.config)

    log_file = config.log_file
    if args.no_log_file:
        log_file = None
    elif args.log_file:
        log_file = args.log_file
    setup_logger(log_level=args.log_level or config.log_level, log_file=log_file)

    store = TodoStore.initialize(config.seed_items())
    logger.debug("Todo session started with %d items", len(store))

    session = TodoSession(
        store,
        output_format=args.format or config.output_format,
        default_priority=config.default_priority,
        stdout=stdout,
        stderr=stderr,
    )
    return session.run(stdin or sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
