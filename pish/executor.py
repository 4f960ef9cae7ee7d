import errno
import os
import shutil
import sys

import psutil

from pish.config import PROG
from pish.session import ExecutionOutcome

# errno values raised when the child cannot replace itself with the program
EXEC_ERRNOS = {
    errno.ENOENT: 127,
    errno.ENOTDIR: 127,
    errno.ENAMETOOLONG: 127,
    errno.ELOOP: 127,
    errno.EACCES: 126,
    errno.EPERM: 126,
    errno.ENOEXEC: 126,
}

SHELL = "/bin/sh"


def spawn(args):
    """
    Start the program with inherited stdin/stdout/stderr.
    An executable file without a #! line is handed to /bin/sh, as execvp does.
    Returns: psutil.Popen
    """
    try:
        return psutil.Popen(args)
    except OSError as e:
        if e.errno != errno.ENOEXEC:
            raise
        noexec = e

    path = args[0] if os.sep in args[0] else shutil.which(args[0]) or args[0]
    try:
        return psutil.Popen([SHELL, path] + list(args[1:]))
    except FileNotFoundError:
        raise noexec from None


def run_external(args):
    """
    Run an external program in a child process and wait for it.
    The program is looked up through PATH like an interactive shell would.
    Returns: ExecutionOutcome
    """
    try:
        proc = spawn(args)
    except FileNotFoundError:
        print(f"{PROG}: command not found: {args[0]}", file=sys.stderr)
        return ExecutionOutcome.external(127)
    except PermissionError:
        print(f"{PROG}: permission denied: {args[0]}", file=sys.stderr)
        return ExecutionOutcome.external(126)
    except OSError as e:
        if e.errno in EXEC_ERRNOS:
            print(f"{PROG}: {args[0]}: {e.strerror}", file=sys.stderr)
            return ExecutionOutcome.external(EXEC_ERRNOS[e.errno])
        print(f"{PROG}: fork: {e}", file=sys.stderr)
        return ExecutionOutcome.spawn_error()
    except ValueError as e:
        # embedded null byte in an argument
        print(f"{PROG}: fork: {e}", file=sys.stderr)
        return ExecutionOutcome.spawn_error()

    # Block until the child exits, whatever its status
    return ExecutionOutcome.external(proc.wait())
