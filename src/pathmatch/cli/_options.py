"""Shared helpers for CLI subcommands."""

import argparse

from pathmatch.config import MatchOptions


def options_from_args(args: argparse.Namespace) -> MatchOptions:
    """Build ``MatchOptions`` from the ``-i`` / ``--keep-first`` flags."""
    return MatchOptions(
        case_insensitive=args.case_insensitive,
        keep_first_variable=args.keep_first,
    )
