"""Syntax tree for command lines: commands, arguments and pipes."""

from __future__ import annotations

import io
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, TextIO

from dezsh.lexer import Token, TokenType

if TYPE_CHECKING:
    from dezsh.context import ShellContext

_VARIABLE = re.compile(r"\$(?:\{([^}]*)\}?|([A-Za-z0-9_]*))")
_COMMAND_END = frozenset({TokenType.PIPE, TokenType.SEMI, TokenType.EOF})


class NotExecutableError(RuntimeError):
    """Raised when a node that only yields text is asked to run."""

    def __init__(self, node_name: str, text: str) -> None:
        super().__init__(f"{node_name} cannot be executed")
        self.text = text


class ASTNode(ABC):
    """A node of the syntax tree that can be run."""

    token_type: TokenType = TokenType.WORD

    @abstractmethod
    def execute(self, context: ShellContext, stdin: TextIO, stdout: TextIO) -> int:
        """Run the node and return its status."""


class ArgumentNode(ASTNode):
    """A node that yields a string when evaluated."""

    @abstractmethod
    def evaluate(self, context: ShellContext) -> str:
        """Return the argument's text after expansion."""


class LiteralNode(ArgumentNode):
    """A word, expanded for ``$NAME`` and ``${NAME}`` variables."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"LiteralNode({self.value})"

    def evaluate(self, context: ShellContext) -> str:
        def substitute(match: re.Match) -> str:
            braced, bare = match.groups()
            name = braced if braced is not None else bare
            return context.env.get(name, "")

        return _VARIABLE.sub(substitute, self.value)

    def execute(self, context: ShellContext, stdin: TextIO, stdout: TextIO) -> int:
        """Refuse to run; the error carries the word's expanded text."""
        text = self.evaluate(context)
        raise NotExecutableError(type(self).__name__, text)


class CommandNode(ASTNode):
    """A command name with its arguments."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.args: list[ArgumentNode] = []

    def __repr__(self) -> str:
        return f"CommandNode({self.name!r}, {self.args!r})"

    def add_argument(self, arg: ArgumentNode) -> None:
        self.args.append(arg)

    def execute(self, context: ShellContext, stdin: TextIO, stdout: TextIO) -> int:
        args = [arg.evaluate(context) for arg in self.args]
        command = context.commands.get(self.name)
        if command is not None:
            return command.execute(context, args, stdin, stdout)
        return context.execute_external(self.name, args, stdin, stdout)


class PipeNode(ASTNode):
    """Runs the left side, feeding its output to the right side."""

    token_type = TokenType.PIPE

    def __init__(
        self, left: ASTNode | None = None, right: ASTNode | None = None
    ) -> None:
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"PipeNode({self.left!r}, {self.right!r})"

    def execute(self, context: ShellContext, stdin: TextIO, stdout: TextIO) -> int:
        buffer = io.StringIO()
        if self.left is not None:
            self.left.execute(context, stdin, buffer)
        if self.right is None:
            return 0
        return self.right.execute(context, io.StringIO(buffer.getvalue()), stdout)


def parse_tokens(tokens: Sequence[Token]) -> ASTNode | None:
    """Build a tree from tokens; the first pipe splits the line in two."""
    if not tokens:
        return None

    for index, token in enumerate(tokens):
        if token.type is TokenType.PIPE:
            left, right = tokens[:index], tokens[index + 1:]
            return PipeNode(
                parse_tokens(left) if left else None,
                parse_tokens(right) if right else None,
            )
        if token.type in (TokenType.EOF, TokenType.SEMI):
            break

    command = CommandNode(tokens[0].value)
    for token in tokens[1:]:
        if token.type is TokenType.WORD:
            command.add_argument(LiteralNode(token.value))
        elif token.type in _COMMAND_END:
            break
    return command


class AST:
    """A parsed command line ready to run."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.root = parse_tokens(tokens)

    def execute(self, context: ShellContext, stdin: TextIO, stdout: TextIO) -> int:
        if self.root is None:
            return 1
        return self.root.execute(context, stdin, stdout)