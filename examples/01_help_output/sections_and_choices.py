#!/usr/bin/env python3
"""
Help output extensions of ArgObj.

This example demonstrates:
- A long description paragraph below the short description
- A braced list of choices with a description per value
- Aliases sharing one placeholder ("-a, --author NAME")
- A section header grouping the search options

Usage:
    python sections_and_choices.py --help
    python sections_and_choices.py --output xml --query archive

Expected --help output:

    usage: sections_and_choices.py [-h] [-v] [--output TYPE] [-a NAME]
                                   [--query QUERY] [--category CATEGORY]

    Suspendisse at sodales leo, in bibendum ex.

    Lorem ipsum dolor sit amet, consectetur adipiscing elit. Maecenas ac lectus
    lacinia, laoreet sem sit amet, imperdiet tellus.

    options:
      -h, --help           show this help message and exit
      -v, --version        show program's version number and exit
      --output TYPE        Result output format.
         {json,              JSON string (default).
          xml,               XML string.
          terminal}          Plain text readable in terminal.
      -a, --author NAME    Author of the work.

    Search options:
      --query QUERY        Query string to search for.
      --category CATEGORY  Specific category ID.

    For more information, see <https://github.com/msikma/argobj>.
"""

from argobj import ArgObj


def main() -> None:
    parser = ArgObj(
        description="Suspendisse at sodales leo, in bibendum ex",
        long_description=(
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Maecenas "
            "ac lectus lacinia, laoreet sem sit amet, imperdiet tellus."
        ),
        epilog="For more information, see <https://github.com/msikma/argobj>.",
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

    args = parser.parse_args()
    print(vars(args))


if __name__ == "__main__":
    main()
