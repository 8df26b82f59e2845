"""
Recording of help annotations made while options are registered.

Section headers and choice blocks cannot be expressed through argparse
itself, so the wrapper remembers just enough about each registration to
place them in the rendered help later on.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .matching import longest_argument

lg = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionMarker:
    """A header to print directly above the option identified by match."""

    header: str
    match: str


@dataclass(frozen=True)
class ChoiceAnnotation:
    """Permitted values of an option and their descriptions."""

    aliases: tuple[str, ...]
    choices: tuple[Any, ...]
    choices_help: tuple[str | None, ...]

    @property
    def match(self) -> str:
        """Option string used to locate the option row."""
        return longest_argument(self.aliases)


class AnnotationRecorder:
    """
    Accumulates section markers and choice annotations in call order.

    A section is armed with mark_section() and attached to the next option
    registered; the option's longest alias becomes the key used to find it in
    the rendered help. A pending section that is never followed by an option
    is dropped.

    Example:
        recorder = AnnotationRecorder()
        recorder.mark_section("Search options:")
        recorder.register_option(["--query"])
        recorder.sections  # [SectionMarker("Search options:", "--query")]
    """

    def __init__(self) -> None:
        self.sections: list[SectionMarker] = []
        self.choices: list[ChoiceAnnotation] = []
        self._pending_header: str | None = None

    @property
    def pending_header(self) -> str | None:
        """Header waiting for the next option, if any."""
        return self._pending_header

    def mark_section(self, header: str) -> None:
        """Arm a section header for the next registered option."""
        if self._pending_header is not None:
            lg.debug(
                "replacing pending section",
                extra={"dropped": self._pending_header, "header": header},
            )
        self._pending_header = header

    def register_option(
        self,
        aliases: Sequence[str],
        choices: Iterable[Any] | None = None,
        metavar: Any = None,
        choices_help: Sequence[str | None] | None = None,
    ) -> None:
        """
        Record the annotations carried by one option registration.

        A choice annotation is kept only when choices, metavar and
        choices_help are all given; partial combinations fall back to the
        default argparse rendering.

        Args:
            aliases: Option strings (or positional name) of the option
            choices: Permitted values
            metavar: Placeholder label
            choices_help: Descriptions parallel to choices
        """
        if self._pending_header is not None:
            marker = SectionMarker(self._pending_header, longest_argument(aliases))
            self.sections.append(marker)
            self._pending_header = None
            lg.debug(
                "section recorded",
                extra={"header": marker.header, "match": marker.match},
            )

        if choices and metavar and choices_help:
            annotation = ChoiceAnnotation(
                tuple(aliases), tuple(choices), tuple(choices_help)
            )
            self.choices.append(annotation)
            lg.debug("choices recorded", extra={"match": annotation.match})
        elif choices_help:
            lg.debug(
                "choices_help ignored, choices and metavar are required",
                extra={"aliases": list(aliases)},
            )
