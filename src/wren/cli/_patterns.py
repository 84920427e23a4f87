"""``wren match`` and ``wren reverse`` — try a pattern from the shell."""

import argparse
import sys

from wren.errors import ArgumentCountError, MalformedPatternError, NoMatchError
from wren.routing.pattern import UrlPattern


def _compile(raw: str) -> UrlPattern:
    try:
        return UrlPattern(raw)
    except MalformedPatternError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


def run_match(args: argparse.Namespace) -> None:
    """Print the groups of ``args.path``; exit 1 when it does not match."""
    pattern = _compile(args.pattern)

    if args.non_fragment:
        matched = pattern.matches_non_fragment(args.path)
        print("match" if matched else "no match")
        if not matched:
            raise SystemExit(1)
        return

    try:
        groups = pattern.parse(args.path)
    except NoMatchError as exc:
        print(f"no match: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print("match")
    for index, group in enumerate(groups, start=1):
        print(f"  {index}: {group}")


def run_reverse(args: argparse.Namespace) -> None:
    """Print the path built from ``args.args``."""
    pattern = _compile(args.pattern)
    try:
        print(pattern.reverse(args.args, use_fragment=args.fragment))
    except ArgumentCountError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
