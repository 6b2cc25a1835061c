"""Pathmatch CLI — try templates against paths from the shell.

Entry point registered as ``pathmatch`` in ``pyproject.toml``::

    [project.scripts]
    pathmatch = "pathmatch.cli:main"
"""

import argparse
import sys


def _add_option_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--case-insensitive",
        action="store_true",
        help="Compare literal segments ignoring ASCII case",
    )
    parser.add_argument(
        "--keep-first",
        action="store_true",
        help="Keep the first value when a variable is captured twice",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathmatch`` command."""
    parser = argparse.ArgumentParser(
        prog="pathmatch",
        description="Pathmatch — match slash-delimited paths against templates.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathmatch match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match one path against a template")
    match_parser.add_argument("template", help="Template string (e.g. /users/{id})")
    match_parser.add_argument("path", help="Concrete path (e.g. /users/42)")
    _add_option_flags(match_parser)

    # -- pathmatch check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate template strings")
    check_parser.add_argument("templates", nargs="+", help="Template strings to compile")

    # -- pathmatch walk ---------------------------------------------------
    walk_parser = subparsers.add_parser(
        "walk", help="Step through a path with a sequence of templates"
    )
    walk_parser.add_argument("path", help="Concrete path to walk")
    walk_parser.add_argument("templates", nargs="+", help="Templates applied in order")
    _add_option_flags(walk_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from pathmatch.cli._match import run_match

        run_match(args)
    elif args.command == "check":
        from pathmatch.cli._check import run_check

        run_check(args)
    elif args.command == "walk":
        from pathmatch.cli._walk import run_walk

        run_walk(args)
