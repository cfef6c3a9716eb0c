"""Environment table, builtin commands and text helpers for a small shell."""

__version__ = "0.1.0"
__all__ = ["textutils", "env", "builtins", "exit_builtin"]