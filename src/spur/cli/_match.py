"""``spur match`` — show which route a request would reach."""

import argparse
import sys

from spur.cli._resolve import resolve_or_exit


def run_match(args: argparse.Namespace) -> None:
    """Print the matched route and its bound parameters.

    Exits 1 when no route matches.
    """
    router = resolve_or_exit(args)

    match = router.match(args.method, args.path)
    if match is None:
        print(f"No route matches {args.method} {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    route = match.route
    print(f"{route.method} /{route.path} ({route.name})")
    for name, value in match.params.items():
        print(f"  {name} = {value}")
