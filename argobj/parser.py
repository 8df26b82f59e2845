"""
Argument parser wrapper with extended help output.

ArgObj keeps argparse in charge of everything related to parsing and only
changes how help is presented: an extra long description paragraph, section
headers between groups of options, braced choice lists with per-value
descriptions and, optionally, a single placeholder per option.
"""

import argparse
from collections.abc import Sequence
from typing import IO, Any

from . import text
from .annotations import AnnotationRecorder
from .formatter import ArgObjHelpFormatter, SingleMetavarHelpFormatter
from .renderer import HelpRenderer


class HelpParser(argparse.ArgumentParser):
    """ArgumentParser whose help text is produced by a HelpRenderer."""

    renderer: HelpRenderer | None = None

    def format_help(self) -> str:
        if self.renderer is None:
            return super().format_help()
        return self.renderer.render()


def _resolve_formatter_class(
    requested: type | None, no_double_metavars: bool
) -> type[ArgObjHelpFormatter]:
    """Pick the help formatter class for a new parser."""
    if requested is None:
        return SingleMetavarHelpFormatter if no_double_metavars else ArgObjHelpFormatter

    if not (isinstance(requested, type) and issubclass(requested, ArgObjHelpFormatter)):
        raise TypeError(
            f"formatter_class must be a subclass of ArgObjHelpFormatter, got {requested!r}"
        )
    if no_double_metavars and not issubclass(requested, SingleMetavarHelpFormatter):
        return type(requested.__name__, (SingleMetavarHelpFormatter, requested), {})
    return requested


class ArgObj:
    """
    Wrapper around argparse.ArgumentParser with richer help output.

    Example:
        parser = ArgObj(
            description="Search the archive",
            long_description="A longer paragraph shown below the description.",
            no_double_metavars=True,
            version="1.0.0",
        )
        parser.add_argument(
            "--output",
            help="Result output format.",
            choices=["json", "xml"],
            choices_help=["JSON string.", "XML string."],
            metavar="TYPE",
            default="json",
        )
        parser.add_section("Search options:")
        parser.add_argument("--query", help="Query string to search for.")
        args = parser.parse_args()
    """

    def __init__(
        self,
        prog: str | None = None,
        usage: str | None = None,
        description: str | None = None,
        long_description: str | None = None,
        epilog: str | None = None,
        version: str | None = None,
        add_help: bool = True,
        no_wrapping: bool = False,
        ensure_period: bool = True,
        no_double_metavars: bool = False,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the wrapper and its underlying parser.

        Args:
            prog: Program name (defaults to argparse's choice)
            usage: Custom usage string
            description: Short description; a period is appended unless
                ensure_period is False
            long_description: Extra paragraph printed after the description
            epilog: Closing text, printed verbatim
            version: Adds -v/--version printing this string when set
            add_help: Add the automatic -h/--help option
            no_wrapping: Print the long description without re-flowing it
            ensure_period: Force a trailing period on the description
            no_double_metavars: Print an option's placeholder once, after its
                last alias
            **kwargs: Passed through to argparse.ArgumentParser. A
                formatter_class must derive from ArgObjHelpFormatter; with
                no_double_metavars it is combined with
                SingleMetavarHelpFormatter

        Raises:
            TypeError: If formatter_class is not an ArgObjHelpFormatter
        """
        if ensure_period and description:
            description = text.ensure_period(description)

        formatter_class = _resolve_formatter_class(
            kwargs.pop("formatter_class", None), no_double_metavars
        )
        self.parser = HelpParser(
            prog=prog,
            usage=usage,
            description=description,
            epilog=epilog,
            add_help=add_help,
            formatter_class=formatter_class,
            **kwargs,
        )
        self.recorder = AnnotationRecorder()
        self.renderer = HelpRenderer(
            self.parser,
            self.recorder,
            long_description=long_description,
            wrapping=not no_wrapping,
        )
        self.parser.renderer = self.renderer

        if version is not None:
            self.parser.add_argument(
                "-v",
                "--version",
                action="version",
                version=version,
                help="show program's version number and exit",
            )

    @property
    def prog(self) -> str:
        """Program name used in usage and help output."""
        return self.parser.prog

    def add_argument(self, *aliases: str, **kwargs: Any) -> argparse.Action:
        """
        Add an option to the parser.

        Accepts everything argparse.ArgumentParser.add_argument() does, plus
        choices_help: descriptions parallel to choices. When choices, metavar
        and choices_help are all given, the choices are listed below the
        option in help output.

        Returns:
            argparse.Action: The action created by argparse
        """
        choices_help = kwargs.pop("choices_help", None)
        action = self.parser.add_argument(*aliases, **kwargs)
        self.recorder.register_option(
            aliases,
            choices=kwargs.get("choices"),
            metavar=kwargs.get("metavar"),
            choices_help=choices_help,
        )
        return action

    def add_section(self, header: str) -> None:
        """Print header in help output right above the next added option."""
        self.recorder.mark_section(header)

    def format_help(self) -> str:
        """Return the complete help text."""
        return self.renderer.render()

    def format_usage(self) -> str:
        """Return the usage synopsis."""
        return self.parser.format_usage()

    def print_help(self, file: IO[str] | None = None) -> None:
        """Print help text (stdout by default)."""
        self.parser.print_help(file=file)

    def print_usage(self, file: IO[str] | None = None) -> None:
        """Print usage synopsis (stdout by default)."""
        self.parser.print_usage(file=file)

    def parse_args(
        self,
        args: Sequence[str] | None = None,
        namespace: argparse.Namespace | None = None,
    ) -> argparse.Namespace:
        """Parse command line arguments (sys.argv[1:] by default)."""
        return self.parser.parse_args(args, namespace)

    def parse_known_args(
        self,
        args: Sequence[str] | None = None,
        namespace: argparse.Namespace | None = None,
    ) -> tuple[argparse.Namespace, list[str]]:
        """Parse known arguments and return the remaining ones."""
        return self.parser.parse_known_args(args, namespace)

    def error(self, message: str) -> None:
        """Print usage and message to stderr and exit with status 2."""
        self.parser.error(message)
