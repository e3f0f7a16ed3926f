import io
from pathlib import PurePosixPath

import pytest

from dezsh.commands import Command
from dezsh.context import ShellContext
from dezsh.lexer import tokenize
from dezsh.syntax_tree import AST, CommandNode, LiteralNode, PipeNode, parse_tokens


class _Upper(Command):
    name = "upper"

    def execute(self, context, args, stdin, stdout):
        stdout.write(stdin.read().upper())
        return 7


@pytest.fixture
def context(tmp_path):
    ctx = ShellContext(
        env={"HOME": "/home/u", "PATH": str(tmp_path), "USER": "u", "FOO": "bar"},
        current_dir=PurePosixPath("/home/u"),
        hostname="host",
    )
    ctx.commands["upper"] = _Upper()
    return ctx


def run(context, line):
    out = io.StringIO()
    status = AST(tokenize(line)).execute(context, io.StringIO(), out)
    return status, out.getvalue()


def test_parse_empty_is_none():
    assert parse_tokens([]) is None


def test_empty_ast_returns_one(context):
    assert AST([]).execute(context, io.StringIO(), io.StringIO()) == 1


def test_parse_command_structure():
    node = parse_tokens(tokenize("echo hello world"))
    assert isinstance(node, CommandNode)
    assert node.name == "echo"
    assert [arg.value for arg in node.args] == ["hello", "world"]


def test_parse_pipe_structure():
    node = parse_tokens(tokenize("echo a | upper"))
    assert isinstance(node, PipeNode)
    assert isinstance(node.left, CommandNode) and node.left.name == "echo"
    assert isinstance(node.right, CommandNode) and node.right.name == "upper"


def test_echo_runs(context):
    assert run(context, "echo hello world") == (0, "hello world\n")


def test_semicolon_stops_command(context):
    assert run(context, "echo a ; echo b") == (0, "a\n")


def test_operators_other_than_pipe_are_skipped(context):
    assert run(context, "echo a > b") == (0, "a b\n")


def test_pipe_feeds_right_side(context):
    assert run(context, "echo hi | upper") == (7, "HI\n")


def test_pipe_discards_left_output(context):
    status, output = run(context, "echo hi | echo there")
    assert status == 0
    assert output == "there\n"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("$FOO", "bar"),
        ("${FOO}x", "barx"),
        ("a$MISSING-b", "a-b"),
        ("$", ""),
        ("plain", "plain"),
        ("${FOO", "bar"),
    ],
)
def test_literal_expansion(context, text, expected):
    assert LiteralNode(text).evaluate(context) == expected


def test_quoted_argument_is_expanded(context):
    assert run(context, 'echo "$HOME x"') == (0, "/home/u x\n")


def test_literal_cannot_execute(context):
    with pytest.raises(RuntimeError, match="cannot be executed"):
        LiteralNode("x").execute(context, io.StringIO(), io.StringIO())


def test_unknown_command_not_found(context, capsys):
    status, _ = run(context, "no-such-command-here")
    assert status == -1
    assert "no-such-command-here: not found" in capsys.readouterr().out