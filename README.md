# minishellpy

A small shell toolkit. It has an interactive prompt that checks each line for
shell operators. Its library splits a command line into tokens, removes quotes,
expands `$VARIABLES`, groups tokens into a command with its redirections, and
runs that command from the directories on `PATH`.

## Installation

```
pip install .
```

## Running the prompt

```
minishellpy
```

The prompt is `$>`. The shell checks each line you type. If the line contains
`||`, `<<` or `>>`, `<` or `>`, `|`, `"` or `\`, the shell prints a short
message naming what it found and exits with status 0. Any other line is echoed
back with a leading space. If the `readline` module is available, the line is
also added to the history. End of input (Ctrl-D) exits with status 0.

The command takes no arguments. If you give it any, it prints `error` and exits
with status 1.

## Using the library

```python
from minishellpy.environment import Environment
from minishellpy.tokenizer import split_token
from minishellpy.parser import check_redirections, parse
from minishellpy.executor import execute

env = Environment.from_strings(["PATH=/usr/bin:/bin", "USER=alice"])
tokens = split_token('echo "hello $USER" > out.txt', env, " ")
check_redirections(tokens)          # raises ShellSyntaxError on bad input
command = parse(tokens)
print(command.argv())               # ['echo', 'hello alice']
status = execute(env, command)      # exit status, or None if not found
```

### Modules

- `minishellpy.tokens`: `TokenType` (`WORD`, `PIPE`, `OUTPUT`, `HEREDOC`,
  `OUT_HEREDOC`, `INPUT`), `Token`, `Redirection`, `Command` (with `argv()`),
  and `ShellSyntaxError`.
- `minishellpy.chars`: predicates for shell metacharacters, such as
  `is_pipe`, `is_quote`, `is_relop_double` and `has_double_pipe`.
- `minishellpy.quotes`: `skip_double_quotes`, `skip_single_quotes`,
  `has_unclosed_quotes` and `clean_quotes`.
- `minishellpy.environment`: `Environment`, an ordered copy of `NAME=value`
  entries. It provides `from_strings`, `get`, `to_strings`, `len()` and `in`.
- `minishellpy.expand`: `expand_word`. It replaces `$NAME` outside single
  quotes, and an unknown name becomes the empty string.
- `minishellpy.tokenizer`: `count_words`, `read_token` and `split_token`.
  Tokens are ranked from 1 in the order they appear.
- `minishellpy.parser`: `count_pipes`, `check_redirections` and `parse`.
- `minishellpy.executor`: `split_path`, `search_path`, `resolve_command`,
  `execute` and `ExecutionError`. `execute` handles these redirections:
  - `>` truncates its file.
  - `>>` appends to its file.
  - `<` reads from its file. It also stops redirection processing, so standard
    output is left unchanged.
- `minishellpy.builtins`: `has_n_option`, `echo` (with `-n`),
  `find_token_by_rank` and `run_builtin`.
- `minishellpy.shell`: `scan_line` and the interactive `main`.

## What it does not do

- The interactive prompt only reports operators. It does not run commands.
  To run one, call `execute` from the library.
- `parse` builds a single command. Pipes are recognised and counted, but a
  pipeline is not run as connected processes.
- A `<<` here-document is tokenized and parsed, but `execute` does nothing with
  it.
- `echo` is the only builtin. There is no `cd`, `pwd`, `export`, `unset`, `env`
  or `exit`.

## Running the tests

```
pip install .[test]
pytest
```