#!/usr/bin/env python3
"""
Example command showing the extended help output.

Usage:
    argobj-example --help
    argobj-example --output xml -a "Jane Doe" --query archive
"""

import argparse
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

import argobj
from argobj.parser import ArgObj

DESCRIPTION = "Suspendisse at sodales leo, in bibendum ex"
LONG_DESCRIPTION = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Maecenas ac "
    "lectus lacinia, laoreet sem sit amet, imperdiet tellus. Etiam augue erat, "
    "elementum vel malesuada non, varius quis lectus. Phasellus quis "
    "sollicitudin dui, nec tristique ex."
)
EPILOG = "For more information, see <https://github.com/msikma/argobj>."


def build_example_parser(prog: str | None = None) -> ArgObj:
    """Build the demonstration parser."""
    parser = ArgObj(
        prog=prog,
        description=DESCRIPTION,
        long_description=LONG_DESCRIPTION,
        epilog=EPILOG,
        version=argobj.__version__,
        no_double_metavars=True,
    )
    parser.add_argument(
        "--output",
        help="Result output format.",
        choices=["json", "xml", "terminal"],
        choices_help=[
            "JSON string (default).",
            "XML string.",
            "Plain text readable in terminal.",
        ],
        default="json",
        metavar="TYPE",
    )
    parser.add_argument("-a", "--author", help="Author of the work.", metavar="NAME")

    parser.add_section("Search options:")
    parser.add_argument("--query", help="Query string to search for.")
    parser.add_argument("--category", help="Specific category ID.")
    return parser


def print_namespace(namespace: argparse.Namespace, console: Console) -> None:
    """Print parsed options as a two-column table."""
    table = Table(title="Parsed options")
    table.add_column("Option", style="cyan")
    table.add_column("Value")
    for key, value in sorted(vars(namespace).items()):
        table.add_row(key, repr(value))
    console.print(table)


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Main entry point for the example command."""
    console = console or Console()
    args = build_example_parser().parse_args(argv)
    console.print("Run with --help for an example of the new formatting options.")
    print_namespace(args, console)
    return 0


if __name__ == "__main__":
    exit(main())
