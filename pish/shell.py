import sys

from pish.builtin import execute_builtin, usage_error
from pish.config import PROG, PROMPT, history_path
from pish.executor import run_external
from pish.history import HistoryStore, init_readline
from pish.parser import clip_line, is_blank, parse_command
from pish.session import Session, SessionMode


def read_line(session):
    """
    Show the prompt (interactive only) and read one line.
    Returns: the line without its terminator, or None at EOF
    """
    if session.interactive and session.stream is sys.stdin and sys.stdin.isatty():
        # readline draws the prompt itself
        try:
            return clip_line(input(PROMPT))
        except EOFError:
            return None

    if session.interactive:
        print(PROMPT, end="", flush=True)
    line = session.stream.readline()
    if not line:
        return None
    return clip_line(line)


def dispatch(args, session):
    """Try builtins first, otherwise run the external program"""
    outcome = execute_builtin(args, session)
    if outcome is None:
        outcome = run_external(args)
    return outcome


def run_loop(session):
    """
    Main interpreter loop. Runs until EOF or the exit builtin.
    Returns: exit status
    """
    while True:
        line = read_line(session)
        if line is None:
            if session.interactive:
                print()
            return 0

        if is_blank(line):
            continue

        args = parse_command(line)

        if session.interactive:
            session.history.record(line)

        if not args:
            continue

        dispatch(args, session)


def main(argv=None):
    """
    Entry point.
      pish          interactive mode on stdin
      pish FILE     batch mode, commands read from FILE
    Returns: exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) > 1:
        usage_error()
        return 1

    # undecodable bytes pass through to history and argv unchanged
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")

    history = HistoryStore(history_path())

    if not argv:
        init_readline(history)
        return run_loop(Session(SessionMode.INTERACTIVE, sys.stdin, history))

    try:
        script = open(argv[0], "r", encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        print(f"{PROG}: open: {e}", file=sys.stderr)
        return 1

    with script:
        return run_loop(Session(SessionMode.BATCH, script, history))
