import os

PROG = "pish"

# U+25B6 and two spaces
PROMPT = "▶  "

# Input buffer: a line keeps at most MAX_LINE - 1 characters
MAX_LINE = 1024

# Argument list capacity: at most MAX_ARGC - 1 tokens are kept
MAX_ARGC = 64

HISTORY_FILE = "~/.pish_history"


def history_path():
    """History file path; PISH_HISTFILE overrides the default"""
    return os.path.expanduser(os.getenv("PISH_HISTFILE") or HISTORY_FILE)
