"""The interactive shell: prompt, completion and the read-run loop."""

from __future__ import annotations

import sys
from typing import TextIO

from dezsh.context import ShellContext
from dezsh.lexer import tokenize
from dezsh.syntax_tree import AST

RESET = "\033[0m"


def _color(code: str) -> str:
    return f"\033[{code}m"


def build_prompt(context: ShellContext) -> str:
    """Return the coloured prompt showing user, host, directory and status."""
    username = context.env.get("USER", "unknown")
    directory = str(context.current_dir)
    home = context.env["HOME"]
    if directory.startswith(home):
        directory = "~" + directory[len(home):]
    status = "\u2714" if context.exit_code == 0 else "\u2718"
    return (
        f"{_color('34')}{username}@{_color('36')}{context.hostname}{_color('0')}:"
        f"{_color('32')}{directory}{_color('0')}"
        f" {_color('31')}{status}{_color('0')}"
        " |~> "
    )


class Shell:
    """Reads command lines, runs them and keeps the shell's state."""

    def __init__(self, context: ShellContext | None = None) -> None:
        self.context = context if context is not None else ShellContext()
        self._matches: list[str] = []

    def _install_completion(self) -> None:
        try:
            import readline
        except ImportError:
            return
        readline.set_completer(self.complete)
        readline.parse_and_bind("tab: complete")
        readline.parse_and_bind("set show-all-if-ambiguous on")

    def complete(self, text: str, state: int) -> str | None:
        """Return the ``state``-th built-in command name starting with ``text``."""
        if state == 0:
            self._matches = [
                name for name in self.context.commands if name.startswith(text)
            ]
        return self._matches[state] if state < len(self._matches) else None

    def run_line(self, line: str, stdin: TextIO, stdout: TextIO) -> int:
        """Parse and run one command line, returning its status."""
        return AST(tokenize(line)).execute(self.context, stdin, stdout)

    def run(self) -> int:
        """Run the read-evaluate loop until exit or end of input."""
        self._install_completion()
        while self.context.running:
            try:
                line = input(build_prompt(self.context))
            except EOFError:
                break
            if not line.strip(" \t"):
                continue
            try:
                self.context.exit_code = self.run_line(line, sys.stdin, sys.stdout)
            except Exception as exc:  # report any failure and keep the shell alive
                print(exc)
        return self.context.exit_code


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell and return its exit status."""
    return Shell().run()