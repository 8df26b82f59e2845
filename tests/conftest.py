"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the argobj test suite.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from argobj import ArgObj

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may use the filesystem)"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full help rendering and parsing)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def stable_terminal() -> Generator[None, None, None]:
    """
    Pin the help layout.

    argparse sizes help output from the terminal width and may colorize it,
    so both are fixed for the whole session.
    """
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("COLUMNS", "80")
        mp.setenv("NO_COLOR", "1")
        mp.delenv("FORCE_COLOR", raising=False)
        yield


@pytest.fixture
def example_parser() -> ArgObj:
    """
    Provide a parser using every help extension.

    Returns:
        ArgObj: Parser with a choice option, aliases with a placeholder and a
        "Search options:" section
    """
    parser = ArgObj(
        prog="example",
        description="Suspendisse at sodales leo, in bibendum ex",
        long_description=(
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Maecenas "
            "ac lectus lacinia, laoreet sem sit amet, imperdiet tellus. Etiam "
            "augue erat, elementum vel malesuada non, varius quis lectus."
        ),
        epilog="For more information, see <https://example.com/>.",
        version="1.0.0",
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


@pytest.fixture
def example_help(example_parser: ArgObj) -> list[str]:
    """Provide the rendered help of example_parser as lines."""
    return example_parser.format_help().split("\n")


@pytest.fixture
def config_file(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Provide the path of a YAML parser config to be written by the test.

    Yields:
        Path: Not yet existing file inside a temporary directory
    """
    yield tmp_path / "parser.yaml"
