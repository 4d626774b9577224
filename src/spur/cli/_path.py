"""``spur path`` — build the path of a named route."""

import argparse
import sys

from spur.cli._resolve import resolve_or_exit
from spur.errors import ReverseRoutingError


def run_path(args: argparse.Namespace) -> None:
    """Print the path for ``args.name`` built from ``args.args``.

    An empty string argument stands for an omitted optional parameter.
    """
    router = resolve_or_exit(args)

    values = [value or None for value in args.args]
    try:
        path = router.path_for(args.name, *values)
    except ReverseRoutingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(path)
