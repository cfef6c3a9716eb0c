# minish

Parts of a small POSIX-style shell: an ordered environment table, the
builtin commands a shell runs in-process, and the string helpers they
share. The builtins write to the streams you pass them (standard output
and standard error by default) and return an exit status. That makes
them easy to embed and to test.

## Modules

- `minish.textutils`: `atoi`, `split`, `strtrim`, `strnstr`, and a
  minimal printf. `format_printf` returns the text and `printf` writes it
  to standard output and returns its length. The conversions are
  `%c %s %p %d %i %u %x %X %%`.
  - Unknown conversions produce nothing.
  - `%s` of `None` gives `(null)`.
  - `%u` emits a single character offset from `'0'`.
- `minish.env`: `Environment`, an ordered table of `EnvEntry` items.
  Entries may exist without a value, as after `export NAME`. It offers:
  - `get` and `set`.
  - `add_or_update`, which takes an `export`-style `KEY` or `KEY=VALUE`
    argument and places new names at the front.
  - `append`, `parse_and_append`, `remove` and `to_strings`.
  - `Environment.from_strings` builds a table from `KEY=VALUE` strings.
- `minish.builtins`: `echo`, `cd`, `target_path`, `pwd`, `print_env`,
  `print_export`, `export` and `unset`. The checks `is_n_option`,
  `is_valid_identifier` and `is_valid_key` are also here. `cd` updates
  `PWD` and `OLDPWD`, and `cd -` prints the directory it moves to.
- `minish.exit_builtin`: argument checks and status computation for
  `exit`. The entry points are `validate_exit_args`, `exit_status` and
  `exit_builtin`. The helpers are `strip_matching_quotes`,
  `has_numeric_chars`, `is_numeric_argument`, `atol` and `key_prefix`.

## Example

```python
import io
import sys

from minish.env import Environment
from minish import builtins

env = Environment.from_strings(["HOME=/home/user", "PATH=/usr/bin"])
print(env.get("HOME"))          # /home/user

out = io.StringIO()
builtins.echo(["echo", "-n", "hello", "world"], out)
print(repr(out.getvalue()))     # 'hello world'

status = builtins.export(["export", "EDITOR=vi", "1BAD"], env, out, sys.stderr)
print(status)                   # 1: the invalid name is reported
print(env.get("EDITOR"))        # vi

builtins.unset(["unset", "EDITOR"], env, sys.stderr)
print("EDITOR" in env)          # False

print(env.to_strings())         # entries as NAME=value strings
```

Every builtin takes the full argument vector, including the command
name itself. It returns the status a shell would store in `$?`.

`exit_builtin` does not end the process. It prints `exit` when
`announce` is true and returns the status the caller should exit with:

- the argument taken modulo 256, with quotes around it allowed;
- 255 for a non-numeric argument;
- 1 when there are too many arguments.

## What this package does not do

This package is a library only. It has none of the following:

- a command to run and no interactive prompt;
- no reading of command lines and no tokenizing or parsing;
- no variable expansion and no quote removal;
- no pipelines, redirections or here-documents;
- no way to start other programs.

It provides the environment table and the builtins for a shell built
around them to call.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install -e .[test]
pytest
```