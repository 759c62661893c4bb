"""Invoke helpers — call sync or async providers uniformly.

A component's ``get_static_paths`` can be ``def`` or ``async def``. Any
code that calls a user-provided callable must handle both cases. This
module provides a single helper so the sync/async check lives in exactly
one place.

Usage::

    from wren._internal.invoke import invoke

    entries = await invoke(provider.get_static_paths, context)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync — returns immediately, no await needed
        def get_static_paths(context):
            return [{"params": {"slug": "hello"}}]

        # async — returns coroutine, awaited automatically
        async def get_static_paths(context):
            posts = await fetch_posts()
            return context.paginate(posts)
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
