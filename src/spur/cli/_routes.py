"""``spur routes`` — list registered routes.

Resolves an import string to a spur Router and prints all registered
routes with method, path, name and handler info.
"""

import argparse

from spur.cli._resolve import resolve_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATH, NAME and handler for a router."""
    router = resolve_or_exit(args)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        rows.append((str(route.method), f"/{route.path}", route.name, handler_name))

    # Column widths, never narrower than the headers
    widths = [
        max(len(header), *(len(row[i]) for row in rows))
        for i, header in enumerate(("METHOD", "PATH", "NAME"))
    ]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "NAME", "HANDLER"))
    sep_len = sum(widths) + 6 + max(len(row[3]) for row in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
