"""
Exception hierarchy for argobj.

Parse errors caused by user input are not represented here: they are reported
by argparse itself (usage + message on stderr, SystemExit). These classes
cover problems with how a parser is declared.
"""

from typing import Any


class ArgObjError(Exception):
    """
    Base exception for all argobj errors.

    Example:
        try:
            parser = build_parser(load_config("cli.yaml"))
        except ArgObjError as e:
            lg.error(f"could not build parser: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(ArgObjError):
    """
    Declarative parser configuration errors.

    Examples:
        - Config file not found or unreadable
        - Invalid YAML syntax
        - Unknown configuration key
        - Argument entry without flags
    """

    pass
