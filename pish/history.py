import os
import sys

from pish.config import PROG


class HistoryStore:
    """
    Append-only command log, one line per entry.
    The file is opened, appended and closed on every record.
    """

    def __init__(self, path):
        self.path = path

    def record(self, line):
        """Append a command line to the log"""
        try:
            with open(self.path, "a", encoding="utf-8", errors="surrogateescape") as f:
                f.write(line + "\n")
        except OSError as e:
            print(f"{PROG}: open: {e}", file=sys.stderr)

    def list(self):
        """
        Read all recorded lines, oldest first.
        Returns: list of lines (empty if the log cannot be opened)
        """
        try:
            with open(self.path, "r", encoding="utf-8", errors="surrogateescape") as f:
                return [entry.rstrip("\n") for entry in f]
        except OSError as e:
            print(f"{PROG}: open: {e}", file=sys.stderr)
            return []

    def show(self):
        """Print the history with 1-based indices"""
        for i, entry in enumerate(self.list(), start=1):
            print(f"{i} {entry}", flush=True)


def init_readline(history):
    """
    Configure readline so the interactive prompt behaves like a Linux terminal.
    Entries already in the history log are loaded for arrow-key recall.
    Returns: True if readline is active
    """
    if not sys.stdin.isatty():
        return False

    try:
        import readline
    except ImportError:
        print("Warning: readline not available, line editing disabled", file=sys.stderr)
        return False

    readline.parse_and_bind("set editing-mode emacs")
    readline.parse_and_bind("\\e[A: previous-history")
    readline.parse_and_bind("\\e[B: next-history")
    readline.parse_and_bind("\\e[1;5D: backward-word")
    readline.parse_and_bind("\\e[1;5C: forward-word")

    # first run: no log yet
    if os.path.exists(history.path):
        for entry in history.list():
            readline.add_history(entry)
    return True
