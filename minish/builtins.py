"""Builtin commands: echo, cd, pwd, env, export and unset."""

from __future__ import annotations

import os
import string
import sys
from typing import Sequence, TextIO

from .env import Environment

_ALPHA = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)


def _stream(stream: TextIO | None, default: TextIO) -> TextIO:
    return default if stream is None else stream


def _is_name_start(ch: str) -> bool:
    return ch in _ALPHA or ch == "_"


def _is_name_char(ch: str) -> bool:
    return ch in _ALNUM or ch == "_"


def is_n_option(arg: str | None) -> bool:
    """Tell whether ``arg`` is an echo ``-n`` flag such as ``-n`` or ``-nnn``."""
    if not arg or arg[0] != "-":
        return False
    return all(ch == "n" for ch in arg[1:])


def echo(args: Sequence[str], out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; leading ``-n`` flags drop the newline."""
    out = _stream(out, sys.stdout)
    words = list(args[1:])
    newline = True
    while words and is_n_option(words[0]):
        newline = False
        words.pop(0)
    out.write(" ".join(words))
    if newline:
        out.write("\n")
    return 0


def target_path(
    args: Sequence[str],
    env: Environment,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> str | None:
    """Resolve where ``cd`` should go: HOME, OLDPWD for ``-``, or the argument.

    Returns None after reporting an unset variable.
    """
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    path_arg = args[1] if len(args) > 1 else None
    if path_arg is None:
        home = env.get("HOME")
        if home is None:
            err.write("minishell: cd: HOME not set\n")
        return home
    if path_arg == "-":
        oldpwd = env.get("OLDPWD")
        if oldpwd is None:
            err.write("minishell: cd: OLDPWD not set\n")
            return None
        out.write(f"{oldpwd}\n")
        return oldpwd
    return path_arg


def cd(
    args: Sequence[str],
    env: Environment,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Change the working directory and keep PWD and OLDPWD up to date."""
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if len(args) > 2:
        err.write("minishell: cd: too many arguments\n")
        return 0
    old_pwd = env.get("PWD")
    path = target_path(args, env, out, err)
    if path is None:
        return 1
    try:
        os.chdir(path)
    except OSError as exc:
        where = args[1] if len(args) > 1 else "(HOME)"
        err.write(f"minishell: cd: {where}: {exc.strerror}\n")
        return 1
    try:
        new_pwd = os.getcwd()
    except OSError as exc:
        err.write(f"cd: getcwd error: {exc.strerror}\n")
        if old_pwd is not None:
            env.set("OLDPWD", old_pwd)
        return 1
    if old_pwd is not None:
        env.set("OLDPWD", old_pwd)
    env.set("PWD", new_pwd)
    return 0


def pwd(out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Print the actual current working directory."""
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    try:
        cwd = os.getcwd()
    except OSError as exc:
        err.write(f"minishell: pwd: {exc.strerror}\n")
        return 1
    out.write(f"{cwd}\n")
    return 0


def print_env(env: Environment, out: TextIO | None = None) -> int:
    """Print every variable that has a value as ``KEY=VALUE``."""
    out = _stream(out, sys.stdout)
    for entry in env:
        if entry.value is not None:
            out.write(f"{entry.key}={entry.value}\n")
            out.flush()
    return 0


def print_export(env: Environment, out: TextIO | None = None) -> None:
    """List every variable in ``declare -x`` form."""
    out = _stream(out, sys.stdout)
    for entry in env:
        line = f"declare -x {entry.key}"
        if entry.value is not None:
            line += f'="{entry.value}"'
        out.write(line + "\n")


def is_valid_identifier(text: str | None) -> bool:
    """Check the name part (up to any '=') of an ``export`` argument."""
    if not text or not _is_name_start(text[0]):
        return False
    name = text[1:].partition("=")[0]
    return all(_is_name_char(ch) for ch in name)


def is_valid_key(text: str | None) -> bool:
    """Check that ``text`` as a whole is a valid variable name."""
    if not text or not _is_name_start(text[0]):
        return False
    return all(_is_name_char(ch) for ch in text[1:])


def export(
    args: Sequence[str],
    env: Environment,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Set variables from ``KEY`` or ``KEY=VALUE`` arguments, or list them all."""
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if len(args) < 2:
        print_export(env, out)
        return 0
    status = 0
    for arg in args[1:]:
        key = arg.partition("=")[0]
        if not is_valid_identifier(key):
            err.write(f"minishell: export: `{key}': not a valid identifier\n")
            status = 1
            continue
        env.add_or_update(arg)
    return status


def unset(
    args: Sequence[str], env: Environment, err: TextIO | None = None
) -> int:
    """Remove the named variables, reporting names that are not valid."""
    err = _stream(err, sys.stderr)
    status = 0
    for name in args[1:]:
        if is_valid_key(name):
            env.remove(name)
        else:
            err.write(f"unset: '{name}': not a valid identifier\n")
            status = 1
    return status