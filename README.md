# dezsh

dezsh is a small interactive shell for POSIX systems. It reads a line and
splits it into tokens. It then builds a syntax tree from the tokens and
runs it. It has a few builtin commands, pipes between commands, and
variables that are expanded inside arguments. It can also run programs
found on `PATH`.

## Installing

    pip install .

## Running

    dezsh

The prompt shows your user, your host and the working directory. If the
directory is under your home directory, that part is written as `~`. A
mark after the directory shows whether the last command succeeded:

    alice@box:~/projects ✔ |~>

Press Tab to complete builtin command names. This needs the `readline`
module. Press Ctrl-D or type `exit` to leave. If a line raises an error,
the error message is printed and the shell keeps running.

## What it understands

- **Words and quotes**: `echo "hello world"` and `echo 'hello world'`
  each pass a single argument.
- **Variables**: `$NAME` and `${NAME}` are replaced with values from the
  shell's own variables. This happens inside single quotes too. An unknown
  variable is replaced with nothing. At start-up the shell takes only
  `HOME`, `PATH` and `USER` from the process environment.
- **Pipes**: `echo hello | echo` runs the left command first and collects
  its output. That output is then given to the right command as its input.
  A program on the right receives the collected text on its standard input.
- **External programs**: any name that is not a builtin is looked up in
  the directories listed in `PATH`. The lookup also goes into their
  subdirectories. The first executable file with that name is run. If none
  is found, the shell prints `NAME: not found`.

## Builtins

| Command           | Effect                                                                      |
|-------------------|-----------------------------------------------------------------------------|
| `echo ARGS...`    | prints its arguments separated by spaces                                    |
| `pwd`             | prints the current directory                                                |
| `cd [DIR]`        | changes directory; with no argument goes to `$HOME`; a leading `~` is `$HOME` |
| `export K=V ...`  | sets variables; `export K` defines `K` as empty if it is not set            |
| `type NAME`       | tells whether `NAME` is a builtin or the path where it was found            |
| `exit [CODE]`     | leaves the shell with the given integer exit code (default 0)               |

## Limits

- The lexer knows `;`, `&&`, `||`, `&`, `<`, `>`, `>>` and parentheses,
  but the shell does not carry any of them out. There is no redirection,
  no command list, no conditional chaining, no background job and no
  subshell. Parsing stops at the first `;`, so only the command before it
  runs.
- The output of an external program goes straight to the terminal. It is
  not passed down a pipe.
- Variables set with `export` are used only for expansion inside the
  shell. They are not passed to the programs it runs.
- There is no globbing, no history file and no script mode.

## Using it from Python

```python
import io
from dezsh.shell import Shell

shell = Shell()
out = io.StringIO()
shell.run_line("export GREETING=hi", io.StringIO(), out)
shell.run_line("echo $GREETING there", io.StringIO(), out)
print(out.getvalue())  # "hi there\n"
```

You can also use the lower-level pieces on their own:

- `dezsh.lexer.tokenize` turns a line into a list of `Token`s. The list
  ends with an `EOF` token.
- `dezsh.syntax_tree.parse_tokens` builds a tree from those tokens. The
  tree is made of `CommandNode`, `PipeNode` and `LiteralNode` objects.
  `AST` wraps that tree and runs it.
- `dezsh.context.ShellContext` holds the state the commands work on:
  variables, the current directory, the host name, the command registry
  and the exit status.
- `dezsh.commands.default_commands` returns the builtin commands, keyed by
  name.
- `dezsh.shell.build_prompt` renders the prompt for a context.