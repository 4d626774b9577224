"""Invoke helpers — call sync or async handlers uniformly.

Spur handlers can be ``def`` or ``async def``. The async dispatcher calls
user code through this helper so the sync/async check lives in exactly
one place.

Usage::

    from spur._internal.invoke import invoke

    result = await invoke(handler, **params)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        def show_user(username):
            return f"user {username}"

        async def show_post(id):
            post = await load_post(id)
            return post.title
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
