"""``pathmatch check`` — template validation command.

Compiles every template and prints its canonical form. Exits with code 1
if any template is rejected.
"""

import argparse
import sys

from pathmatch.errors import GrammarError
from pathmatch.template.codec import render
from pathmatch.template.parser import compile_template


def run_check(args: argparse.Namespace) -> None:
    """Compile each of ``args.templates``, reporting every failure."""
    failures = 0
    for source in args.templates:
        try:
            template = compile_template(source)
        except GrammarError as exc:
            failures += 1
            print(f"Error: {exc}", file=sys.stderr)
            continue
        print(f"ok  {render(template)}")

    if failures:
        raise SystemExit(1)
