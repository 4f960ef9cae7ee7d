import os
import sys

from pish.config import PROG
from pish.session import ExecutionOutcome


def usage_error():
    """Print usage error for built-in commands"""
    print(f"{PROG}: Usage error", file=sys.stderr)
    return ExecutionOutcome.usage_error()


def builtin_exit(args, session):
    """Exit the interpreter with success status"""
    if len(args) != 1:
        return usage_error()
    sys.exit(0)


def builtin_cd(args, session):
    """Change directory; the working directory is untouched on failure"""
    if len(args) != 2:
        return usage_error()
    try:
        os.chdir(args[1])
    except (OSError, ValueError) as e:
        print(f"cd: {e}", file=sys.stderr)
    return ExecutionOutcome.builtin()


def builtin_history(args, session):
    """Show command history"""
    if len(args) != 1:
        return usage_error()
    session.history.show()
    return ExecutionOutcome.builtin()


BUILTINS = {
    "exit": builtin_exit,
    "cd": builtin_cd,
    "history": builtin_history,
}


def execute_builtin(args, session):
    """
    Execute built-in command if the first argument names one.
    Returns: ExecutionOutcome, or None if args is not a builtin
    """
    handler = BUILTINS.get(args[0])
    if handler is None:
        return None
    return handler(args, session)
