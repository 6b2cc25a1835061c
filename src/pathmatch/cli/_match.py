"""``pathmatch match`` — one-shot template match.

Prints the captures as JSON. Exits with code 1 when the path does not
match or the template is invalid.
"""

import argparse
import json
import sys

from pathmatch.cli._options import options_from_args
from pathmatch.errors import GrammarError
from pathmatch.matching.matcher import match_path


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.path`` against ``args.template`` and print the captures."""
    try:
        matched, captures = match_path(args.template, args.path, options_from_args(args))
    except GrammarError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not matched:
        print(f"No match: {args.path!r} does not match {args.template!r}", file=sys.stderr)
        raise SystemExit(1)

    print(json.dumps(captures, indent=2, sort_keys=True))
