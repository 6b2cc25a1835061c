"""``pathmatch walk`` — step a cursor through a path.

Applies each template in order, printing what every step captured and
what is left. Exits with code 1 if a step fails or the walk stops short
of the end of the path.
"""

import argparse
import json
import sys

from pathmatch.cli._options import options_from_args
from pathmatch.errors import GrammarError
from pathmatch.matching.cursor import Cursor
from pathmatch.template.parser import compile_template


def run_walk(args: argparse.Namespace) -> None:
    """Walk ``args.path`` with ``args.templates`` and print each step."""
    try:
        templates = [compile_template(source) for source in args.templates]
    except GrammarError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    cursor = Cursor(args.path, options_from_args(args))
    for template in templates:
        captures, matched = cursor.step(template)
        if not matched:
            print(
                f"Error: {str(template)!r} does not match {cursor.remaining()!r}",
                file=sys.stderr,
            )
            raise SystemExit(1)
        left = cursor.remaining() or "(done)"
        print(f"{template}  {json.dumps(captures, sort_keys=True)}  -> {left}")

    print(json.dumps(cursor.variables(), indent=2, sort_keys=True))
    if not cursor.is_complete():
        print(f"Error: unconsumed path {cursor.remaining()!r}", file=sys.stderr)
        raise SystemExit(1)
