"""
Declarative parser configuration.

A parser can be described as a mapping (typically loaded from YAML) instead
of a sequence of calls:

    description: Search the archive
    long_description: >
      A longer paragraph shown below the description.
    no_double_metavars: true
    version: 1.0.0
    arguments:
      - flags: [--output]
        help: Result output format.
        choices: [json, xml]
        choices_help: [JSON string., XML string.]
        metavar: TYPE
        default: json
      - section: "Search options:"
      - flags: [--query]
        help: Query string to search for.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .constants import MAX_CONFIG_SIZE_BYTES
from .exceptions import ConfigError
from .parser import ArgObj

# Types that may be referenced by name in an argument entry
TYPE_NAMES: dict[str, type] = {"str": str, "int": int, "float": float}

_BOOL_OPTIONS = ("add_help", "no_wrapping", "ensure_period", "no_double_metavars")
_TEXT_OPTIONS = ("prog", "usage", "description", "long_description", "epilog")


def _check_file_size(path: Path) -> None:
    """Check file size limit before reading a config file."""
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"config file is {file_size} bytes, exceeding maximum size of "
            f"{MAX_CONFIG_SIZE_BYTES // (1024 * 1024)} MB",
            path=str(path),
        )


def _validate_argument(index: int, entry: Any) -> dict[str, Any]:
    """Validate one entry of the arguments list and return a copy of it."""
    if not isinstance(entry, Mapping):
        raise ConfigError("argument entry must be a mapping", index=index)

    entry = dict(entry)
    if "section" in entry:
        if len(entry) != 1 or not isinstance(entry["section"], str):
            raise ConfigError(
                "section entry must only contain a 'section' string", index=index
            )
        return entry

    flags = entry.get("flags")
    if isinstance(flags, str):
        entry["flags"] = [flags]
    elif not flags or not all(isinstance(flag, str) for flag in flags):
        raise ConfigError("argument entry needs 'flags'", index=index)

    type_name = entry.get("type")
    if type_name is not None and type_name not in TYPE_NAMES:
        raise ConfigError(f"unsupported argument type '{type_name}'", index=index)
    return entry


@dataclass
class ParserConfig:
    """
    Options of an ArgObj parser plus the arguments to register on it.

    Each item of arguments is either {"section": header} or a mapping with
    "flags" (list of option strings) and add_argument() keywords. "type" may
    name one of TYPE_NAMES.
    """

    prog: str | None = None
    usage: str | None = None
    description: str | None = None
    long_description: str | None = None
    epilog: str | None = None
    version: str | None = None
    add_help: bool = True
    no_wrapping: bool = False
    ensure_period: bool = True
    no_double_metavars: bool = False
    arguments: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParserConfig:
        """
        Create a ParserConfig from a mapping.

        Raises:
            ConfigError: On unknown keys or values of the wrong type
        """
        if not isinstance(data, Mapping):
            raise ConfigError("parser config must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError("unknown config keys", keys=", ".join(unknown))

        for key in _BOOL_OPTIONS:
            if key in data and not isinstance(data[key], bool):
                raise ConfigError(f"'{key}' must be a boolean")
        for key in _TEXT_OPTIONS:
            if data.get(key) is not None and not isinstance(data[key], str):
                raise ConfigError(f"'{key}' must be a string")

        options = dict(data)
        if options.get("version") is not None:
            options["version"] = str(options["version"])

        arguments = options.pop("arguments", None) or []
        if not isinstance(arguments, list):
            raise ConfigError("'arguments' must be a list")
        options["arguments"] = [
            _validate_argument(index, entry) for index, entry in enumerate(arguments)
        ]
        return cls(**options)

    def parser_options(self) -> dict[str, Any]:
        """Keyword arguments for the ArgObj constructor."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "arguments"
        }


def load_config(path: str | Path) -> ParserConfig:
    """
    Load a parser configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        ParserConfig: Validated configuration

    Raises:
        ConfigError: If the file cannot be read or is not valid configuration
    """
    path = Path(path)
    try:
        _check_file_size(path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(
            f"cannot read config file: {e.strerror}", path=str(path)
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path=str(path)) from e

    try:
        return ParserConfig.from_dict(data or {})
    except ConfigError as e:
        e.context.setdefault("path", str(path))
        raise


def build_parser(config: ParserConfig | Mapping[str, Any]) -> ArgObj:
    """
    Build an ArgObj with every section and argument of config registered.

    Args:
        config: ParserConfig, or a mapping accepted by ParserConfig.from_dict()

    Returns:
        ArgObj: Ready to parse
    """
    if not isinstance(config, ParserConfig):
        config = ParserConfig.from_dict(config)

    parser = ArgObj(**config.parser_options())
    for entry in config.arguments:
        if "section" in entry:
            parser.add_section(entry["section"])
            continue
        kwargs = {key: value for key, value in entry.items() if key != "flags"}
        if "type" in kwargs:
            kwargs["type"] = TYPE_NAMES[kwargs["type"]]
        parser.add_argument(*entry["flags"], **kwargs)
    return parser
