#!/usr/bin/env python3
"""
Building an ArgObj parser from a YAML file.

Usage:
    python from_yaml.py --help
    python from_yaml.py --output terminal -a "Jane Doe"
"""

import logging
from pathlib import Path

from argobj import ConfigError, build_parser, load_config

lg = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    try:
        parser = build_parser(load_config(Path(__file__).with_name("parser.yaml")))
    except ConfigError as e:
        lg.error(f"invalid parser config: {e}")
        return 1

    args = parser.parse_args()
    lg.info("parsed options", extra={"options": vars(args)})
    print(vars(args))
    return 0


if __name__ == "__main__":
    exit(main())
