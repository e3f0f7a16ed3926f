"""Shell state and execution of programs found on PATH."""

from __future__ import annotations

import os
import socket
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, TextIO

from dezsh.commands import Command, default_commands
from dezsh.helpers import split

_INHERITED_VARIABLES = ("HOME", "PATH", "USER")


def _initial_environment() -> dict[str, str]:
    return {name: os.environ.get(name, "") for name in _INHERITED_VARIABLES}


def _walk(directory: str) -> Iterator[os.DirEntry]:
    """Yield entries below ``directory`` depth first, without following links."""
    with os.scandir(directory) as entries:
        for entry in entries:
            yield entry
            if entry.is_dir(follow_symlinks=False):
                try:
                    yield from _walk(entry.path)
                except PermissionError:
                    continue


@dataclass
class ShellContext:
    """Everything a running shell knows: variables, directory, commands."""

    env: dict[str, str] = field(default_factory=_initial_environment)
    current_dir: Path = field(default_factory=Path.cwd)
    hostname: str = field(default_factory=socket.gethostname)
    commands: dict[str, Command] = field(default_factory=default_commands)
    running: bool = True
    exit_code: int = 0

    def find_executable(self, cmd: str) -> Path | None:
        """Search every PATH directory, recursively, for an executable ``cmd``."""
        for directory in split(self.env.setdefault("PATH", ""), ":"):
            try:
                for entry in _walk(directory):
                    if entry.name == cmd and os.access(entry.path, os.X_OK):
                        return Path(entry.path)
            except PermissionError:
                continue
        return None

    def execute_external(
        self,
        name: str,
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
    ) -> int:
        """Run a program from PATH and return its exit status.

        Input from an upstream stream is piped to the program; the program's
        own output goes straight to the terminal.
        """
        executable = self.find_executable(name)
        if executable is None:
            print(f"{name}: not found")
            return -1

        data = stdin.read() if stdin is not sys.stdin else ""
        argv = [name, *args]
        sys.stdout.flush()
        try:
            if data:
                completed = subprocess.run(
                    argv, executable=str(executable), input=data, text=True
                )
            else:
                completed = subprocess.run(argv, executable=str(executable))
        except OSError as err:
            print(f"execv failed: {err}", file=sys.stderr)
            status = 1
        else:
            status = completed.returncode if completed.returncode >= 0 else -1

        self.exit_code = status
        return status