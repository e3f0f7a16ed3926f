"""Built-in shell commands."""

from __future__ import annotations

import os
import re
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from dezsh.helpers import split

if TYPE_CHECKING:
    from dezsh.context import ShellContext

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(text: str) -> int:
    """Parse a leading integer from ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if not match:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


class Command(ABC):
    """A command the shell runs in-process."""

    name: str = ""

    @abstractmethod
    def execute(
        self,
        context: ShellContext,
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
    ) -> int:
        """Run the command and return its status."""


class EchoCommand(Command):
    name = "echo"

    def execute(self, context, args, stdin, stdout):
        stdout.write(" ".join(args) + "\n")
        return 0


class PwdCommand(Command):
    name = "pwd"

    def execute(self, context, args, stdin, stdout):
        stdout.write(f"{context.current_dir}\n")
        return 0


class ExitCommand(Command):
    name = "exit"

    def execute(self, context, args, stdin, stdout):
        context.running = False
        context.exit_code = _parse_int(args[0]) if args else 0
        return 0


class TypeCommand(Command):
    name = "type"

    def execute(self, context, args, stdin, stdout):
        if not args:
            return 1
        target = args[0]
        # The name itself always goes to the terminal.
        sys.stdout.write(target)
        if target in context.commands:
            stdout.write(" is a shell builtin\n")
        else:
            location = context.find_executable(target)
            if location is not None:
                stdout.write(f" is {location}\n")
            else:
                stdout.write(": not found\n")
        return 0


class CdCommand(Command):
    name = "cd"

    def execute(self, context, args, stdin, stdout):
        if not args:
            os.chdir(context.env.setdefault("HOME", ""))
        elif len(args) == 1:
            target = args[0]
            if os.path.isdir(target):
                os.chdir(target)
            elif target.startswith("~"):
                home = context.env.get("HOME")
                if home is None:
                    stdout.write("Environment variable HOME is not set.\n")
                    return 1
                os.chdir(home + target[1:])
            else:
                stdout.write(f"cd: {target}: No such file or directory\n")
                return 1
        else:
            stdout.write("cd: too many arguments\n")
            return 1
        context.current_dir = Path.cwd()
        return 0


class ExportCommand(Command):
    name = "export"

    def execute(self, context, args, stdin, stdout):
        for arg in args:
            if "=" in arg:
                pair = split(arg, "=")
                if len(pair) == 2:
                    key, value = pair
                    context.env[key] = value
            else:
                context.env.setdefault(arg, "")
        return 0


def default_commands() -> dict[str, Command]:
    """Return a fresh registry of the built-in commands keyed by name."""
    commands = (
        EchoCommand(),
        PwdCommand(),
        ExitCommand(),
        TypeCommand(),
        CdCommand(),
        ExportCommand(),
    )
    return {command.name: command for command in commands}