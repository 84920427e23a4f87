"""``wren routes`` — list registered routes.

Resolves an import string to a wren Router and prints every route with
its pattern, group count, and handler, marking the default.
"""

import argparse
import sys

from wren.cli._resolve import resolve_router


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a wren router, in match order."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    # Build rows: (pattern, groups, handler_name)
    rows: list[tuple[str, str, str]] = []
    for route in router.routes:
        handler_name = route.name
        if route.is_default:
            handler_name = f"{handler_name} (default)"
        rows.append((route.pattern.pattern, str(route.pattern.capture_count), handler_name))

    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_pattern}}}  {{:<6}}  {{}}"
    print(fmt.format("PATTERN", "GROUPS", "HANDLER"))
    sep_len = max_pattern + 8 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, groups, handler_name in rows:
        print(fmt.format(pattern, groups, handler_name))
