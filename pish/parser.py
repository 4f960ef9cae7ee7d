import re

from pish.config import MAX_ARGC, MAX_LINE

# Only space and tab separate tokens
_SEPARATORS = re.compile(r"[ \t]+")


def clip_line(line):
    """
    Strip one trailing line terminator and cut the line to the input buffer size.
    Characters past MAX_LINE - 1 are discarded.
    """
    if line.endswith("\n"):
        line = line[:-1]
    return line[:MAX_LINE - 1]


def is_blank(line):
    """True if the line is empty or holds only spaces and tabs"""
    return not line.strip(" \t")


def parse_command(line):
    """
    Split a command line into its argument list.
    No quoting, escaping or expansion is done. At most MAX_ARGC - 1
    tokens are kept, the rest are dropped without error.
    Returns: list of non-empty tokens
    """
    tokens = [tok for tok in _SEPARATORS.split(line) if tok]
    return tokens[:MAX_ARGC - 1]
