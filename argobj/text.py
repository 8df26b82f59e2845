"""
Plain string helpers used while assembling help text.
"""

import textwrap

from .constants import LONG_DESCRIPTION_WIDTH


def ensure_period(text: str) -> str:
    """Return text with a trailing period, adding one only if missing."""
    if text.endswith("."):
        return text
    return f"{text}."


def remove_unnecessary_lines(text: str) -> str:
    """
    Normalize blank lines in rendered help text.

    Trailing whitespace is stripped from every line, then any run of three or
    more newlines is reduced to two, so at most one blank line separates
    blocks. Applying it twice gives the same result as applying it once.

    Args:
        text: Rendered help text

    Returns:
        str: Text with redundant blank lines removed
    """
    stripped = "\n".join(line.rstrip() for line in text.split("\n"))
    while "\n\n\n" in stripped:
        stripped = stripped.replace("\n\n\n", "\n\n")
    return stripped


def wrap_text(text: str | None, wrapping: bool = True) -> str | None:
    """
    Prepare the long description block.

    When wrapping, whitespace is normalized the same way argparse does for
    help strings and the paragraph is re-flowed to LONG_DESCRIPTION_WIDTH
    columns with a single trailing newline. Otherwise the text is returned
    untouched.

    Args:
        text: Long description paragraph, or None
        wrapping: Whether to re-flow the paragraph

    Returns:
        str | None: The block to insert, or None if there is nothing to insert
    """
    if not text:
        return None
    if not wrapping:
        return text
    collapsed = " ".join(text.split())
    lines = textwrap.wrap(collapsed, LONG_DESCRIPTION_WIDTH)
    return "\n".join(lines) + "\n"
