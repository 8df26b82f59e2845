"""
Predicates for locating options inside rendered help text.

Placement of section headers and choice blocks is done by searching the
already rendered lines, so the predicate is kept here as a pure function.
"""

import re
from collections.abc import Sequence
from functools import lru_cache
from re import Pattern

# Characters that make up an option token; a match may not touch them
_TOKEN_CHARS = r"\w-"

# SGR color sequences, as emitted by colorized argparse help
_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


@lru_cache(maxsize=256)
def _argument_pattern(arg: str) -> Pattern[str]:
    """Compile the whole-token pattern for one option string."""
    return re.compile(
        rf"(?<=[^\[{_TOKEN_CHARS}]){re.escape(arg)}(?![{_TOKEN_CHARS}])"
    )


def has_argument(arg: str, line: str) -> bool:
    """
    Check whether a rendered help line lists the given option.

    The option must appear as a whole token and must be preceded by some
    character other than an opening bracket. The bracket rule keeps usage
    synopsis entries such as ``[--query QUERY]`` from matching, and requiring
    a preceding character excludes text at the very start of a line (option
    rows are always indented). Color sequences are ignored, so colorized
    help output matches the same way as plain output.

    Args:
        arg: Option string to look for, e.g. ``--query``
        line: A single line of rendered help text

    Returns:
        bool: True if the line lists the option
    """
    if not arg:
        return False
    return _argument_pattern(arg).search(strip_ansi(line)) is not None


def strip_ansi(line: str) -> str:
    """Remove terminal color sequences from a line."""
    return _ANSI_ESCAPE.sub("", line)


def longest_argument(args: Sequence[str]) -> str:
    """
    Return the longest option string; ties go to the first one.

    Example:
        longest_argument(["-a", "--author"])  # "--author"
    """
    longest = ""
    for arg in args:
        if len(arg) > len(longest):
            longest = arg
    return longest


def find_first_line(arg: str, lines: Sequence[str]) -> int | None:
    """Return the index of the first line listing arg, or None."""
    for index, line in enumerate(lines):
        if has_argument(arg, line):
            return index
    return None
