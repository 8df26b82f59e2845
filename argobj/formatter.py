"""
Help formatters used by argobj parsers.

These extend the standard argparse HelpFormatter with the pieces the help
renderer needs: verbatim text items (long description and epilogue), choice
block layout based on the measured option column, and an invocation format
that prints the placeholder only once per option.
"""

import argparse
from collections.abc import Sequence
from typing import Any

from .constants import CHOICE_INDENT


class ArgObjHelpFormatter(argparse.HelpFormatter):
    """
    Help formatter with verbatim text items and choice block layout.

    Text added with add_raw_text() is emitted as-is, so line breaks inside a
    long description or epilogue survive. format_choices() must be called
    after the option groups were added, because it relies on the column
    widths argparse measures while adding arguments.

    Options that take a value list the placeholder after every alias
    (``-a NAME, --author NAME``) regardless of the Python version.
    """

    def add_raw_text(self, text: str | None) -> None:
        """Add a block of text that is emitted without re-wrapping."""
        if text is not argparse.SUPPRESS and text:
            self._add_item(self._format_raw_text, [text])

    def _format_action_invocation(self, action: argparse.Action) -> str:
        # Placeholder after every alias: -a NAME, --author NAME
        if not action.option_strings or action.nargs == 0:
            return super()._format_action_invocation(action)

        default = self._get_default_metavar_for_optional(action)
        args_string = self._format_args(action, default)
        return ", ".join(f"{option} {args_string}" for option in action.option_strings)

    def _format_raw_text(self, text: str) -> str:
        """Terminate the text with a newline followed by one blank line."""
        if not text.endswith("\n"):
            text += "\n"
        return text + "\n"

    def choice_width(self) -> int:
        """
        Width of the value cell in a choice block.

        Choice blocks are indented further than option rows, so the cell is
        narrowed to keep descriptions roughly aligned with the help column.
        """
        return min(self._action_max_length - 2, self._max_help_position - 4)

    def format_choices(
        self, choices: Sequence[Any], choices_help: Sequence[str | None]
    ) -> list[str]:
        """
        Lay out a braced list of permitted values with their descriptions.

        Args:
            choices: Permitted values, in display order
            choices_help: Descriptions parallel to choices; missing entries
                render as an empty description

        Returns:
            list[str]: One line per choice, e.g. ``     {json,   JSON string.``
        """
        indent = " " * CHOICE_INDENT
        width = self.choice_width()
        last = len(choices) - 1
        lines = []
        for index, choice in enumerate(choices):
            opener = "{" if index == 0 else " "
            closer = "}" if index == last else ","
            cell = f"{choice}{closer}".ljust(width)
            description = choices_help[index] if index < len(choices_help) else None
            lines.append(f"{indent}{opener}{cell}{description or ''}")
        return lines


class SingleMetavarHelpFormatter(ArgObjHelpFormatter):
    """
    Formatter that prints an option's placeholder once, after its last alias.

    Renders ``-a, --author NAME`` instead of ``-a NAME, --author NAME``. The
    usage synopsis is unaffected.
    """

    def _format_action_invocation(self, action: argparse.Action) -> str:
        if not action.option_strings or action.nargs == 0:
            return super()._format_action_invocation(action)

        default = self._get_default_metavar_for_optional(action)
        args_string = self._format_args(action, default)
        return f"{', '.join(action.option_strings)} {args_string}"
