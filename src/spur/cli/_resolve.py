"""Locate the Router a ``spur`` subcommand should inspect.

Every subcommand takes the same first argument, a ``module:attribute``
string naming where the routes were registered::

    spur routes blog.urls:router
    spur match blog.urls GET /posts/25      # attribute defaults to "router"
    spur path blog.urls:make_router get_post 25
"""

import argparse
import importlib
import sys

from spur.router import Router


def resolve_router(import_string: str) -> Router:
    """Import *import_string* and return the Router it points at.

    The attribute may also be a zero-argument callable that builds the
    router (e.g. ``make_router``), in which case it is called once.

    Raises:
        ModuleNotFoundError: The module part does not import.
        AttributeError: The module has no such attribute.
        TypeError: The attribute, or what its factory returned, is not a
            ``Router``; or the factory itself raised.
    """
    module_name, _, attribute = import_string.partition(":")
    module = importlib.import_module(module_name)
    target = getattr(module, attribute or "router")

    if callable(target) and not isinstance(target, Router):
        try:
            target = target()
        except Exception as exc:
            msg = f"Router factory {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(target, Router):
        msg = f"{import_string!r} resolved to {type(target).__name__}, not a spur.Router instance"
        raise TypeError(msg)
    return target


def resolve_or_exit(args: argparse.Namespace) -> Router:
    """Resolve ``args.app``, printing the error and exiting 1 on failure."""
    try:
        return resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
