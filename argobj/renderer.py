"""
Staged help text rendering.

The renderer builds the baseline help with the parser's formatter, one named
stage at a time, then rewrites the resulting lines to add section headers and
choice blocks. It is owned by the wrapper and installed on the underlying
parser, so --help and format_help() produce the same text.
"""

import argparse
import logging
from collections.abc import Callable

from .annotations import AnnotationRecorder
from .formatter import ArgObjHelpFormatter
from .matching import find_first_line
from .text import remove_unnecessary_lines, wrap_text

lg = logging.getLogger(__name__)

BuildStage = Callable[[ArgObjHelpFormatter], None]
RewriteStage = Callable[[list[str], ArgObjHelpFormatter], list[str]]


def _body_start(lines: list[str]) -> int:
    """Index of the first line after the usage block."""
    for index, line in enumerate(lines):
        if not line.strip():
            return index
    return len(lines)


def _find_option_line(arg: str, lines: list[str]) -> int | None:
    """Find the first option row listing arg, skipping the usage block."""
    start = _body_start(lines)
    found = find_first_line(arg, lines[start:])
    return None if found is None else start + found


class HelpRenderer:
    """
    Produces the final help text for one parser.

    Build stages run in order against a fresh formatter:
    usage, description, long_description, groups, epilog. The formatted text
    is then passed line by line through the rewrite stages:
    sections, choices, cleanup.

    Args:
        parser: Underlying argparse parser; its formatter_class must derive
            from ArgObjHelpFormatter
        recorder: Annotations collected while options were registered
        long_description: Extra paragraph printed after the description
        wrapping: Whether to re-flow the long description
    """

    def __init__(
        self,
        parser: argparse.ArgumentParser,
        recorder: AnnotationRecorder,
        long_description: str | None = None,
        wrapping: bool = True,
    ) -> None:
        self.parser = parser
        self.recorder = recorder
        self.long_description = wrap_text(long_description, wrapping)
        self.build_stages: list[tuple[str, BuildStage]] = [
            ("usage", self._add_usage),
            ("description", self._add_description),
            ("long_description", self._add_long_description),
            ("groups", self._add_groups),
            ("epilog", self._add_epilog),
        ]
        self.rewrite_stages: list[tuple[str, RewriteStage]] = [
            ("sections", self._insert_sections),
            ("choices", self._insert_choices),
            ("cleanup", self._cleanup),
        ]

    def render(self) -> str:
        """Render the complete help text."""
        formatter = self._get_formatter()
        for _name, build in self.build_stages:
            build(formatter)

        lines = formatter.format_help().split("\n")
        for _name, rewrite in self.rewrite_stages:
            lines = rewrite(lines, formatter)
        return "\n".join(lines)

    def _get_formatter(self) -> ArgObjHelpFormatter:
        formatter = self.parser._get_formatter()
        if not isinstance(formatter, ArgObjHelpFormatter):
            raise TypeError(
                f"{type(formatter).__name__} is not an ArgObjHelpFormatter"
            )
        return formatter

    # Build stages

    def _add_usage(self, formatter: ArgObjHelpFormatter) -> None:
        formatter.add_usage(
            self.parser.usage,
            self.parser._actions,
            self.parser._mutually_exclusive_groups,
        )

    def _add_description(self, formatter: ArgObjHelpFormatter) -> None:
        formatter.add_text(self.parser.description)

    def _add_long_description(self, formatter: ArgObjHelpFormatter) -> None:
        formatter.add_raw_text(self.long_description)

    def _add_groups(self, formatter: ArgObjHelpFormatter) -> None:
        for action_group in self.parser._action_groups:
            formatter.start_section(action_group.title)
            formatter.add_text(action_group.description)
            formatter.add_arguments(action_group._group_actions)
            formatter.end_section()

    def _add_epilog(self, formatter: ArgObjHelpFormatter) -> None:
        formatter.add_raw_text(self.parser.epilog)

    # Rewrite stages

    def _insert_sections(
        self, lines: list[str], formatter: ArgObjHelpFormatter
    ) -> list[str]:
        for section in self.recorder.sections:
            index = _find_option_line(section.match, lines)
            if index is None:
                lg.debug("section not placed", extra={"match": section.match})
                continue
            lines[index:index] = ["", section.header]
        return lines

    def _insert_choices(
        self, lines: list[str], formatter: ArgObjHelpFormatter
    ) -> list[str]:
        for annotation in self.recorder.choices:
            index = _find_option_line(annotation.match, lines)
            if index is None:
                lg.debug("choices not placed", extra={"match": annotation.match})
                continue
            block = formatter.format_choices(
                annotation.choices, annotation.choices_help
            )
            lines[index + 1 : index + 1] = block
        return lines

    def _cleanup(self, lines: list[str], formatter: ArgObjHelpFormatter) -> list[str]:
        return remove_unnecessary_lines("\n".join(lines)).split("\n")
