"""Pagination for static-path generation.

A component's ``get_static_paths`` receives a one-shot ``paginate``
helper that slices a collection into pages and returns one static path
per page::

    def get_static_paths(context):
        posts = load_posts()
        return context.paginate(posts, page_size=5)

The owning route must declare a ``page`` parameter (usually
``[...page]``): page 1 leaves it unset, later pages set it to the page
number as a string.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wren.errors import ConfigurationError, DuplicatePaginateCall

if TYPE_CHECKING:
    from wren.pages.static_paths import StaticPath
    from wren.routing.route import RouteData

DEFAULT_PAGE_SIZE = 10

# Route parameter carrying the page number
PAGE_PARAM = "page"


@dataclass(frozen=True, slots=True)
class PageUrls:
    """Navigation URLs for one page. ``prev``/``next`` are ``None`` at the ends."""

    current: str
    next: str | None = None
    prev: str | None = None


@dataclass(frozen=True, slots=True)
class Page[T]:
    """One page of a paginated collection.

    Attributes:
        data: The items on this page.
        start: Index of the first item on this page (0-based).
        end: Index of the last item on this page, inclusive
            (``-1`` for an empty collection).
        total: Total number of items across all pages.
        size: Items per page.
        current: This page's number (1-based).
        last: Number of the last page.
        url: Navigation URLs generated from the owning route.
    """

    data: tuple[T, ...]
    start: int
    end: int
    total: int
    size: float
    current: int
    last: int
    url: PageUrls


class Paginator:
    """The ``paginate`` helper for one static-paths pass.

    Callable exactly once; a second call raises
    :class:`DuplicatePaginateCall`.  State lives on the instance, so
    every pass gets a fresh paginator.
    """

    __slots__ = ("_called", "default_size", "route")

    def __init__(self, route: RouteData, *, default_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.route = route
        self.default_size = default_size
        self._called = False

    def __call__(
        self,
        items: Sequence[Any],
        page_size: float | None = None,
    ) -> list[StaticPath]:
        from wren.pages.static_paths import StaticPath

        if self._called:
            raise DuplicatePaginateCall(self.route.component)
        self._called = True

        size = page_size if page_size is not None else self.default_size
        if size <= 0 or (not math.isinf(size) and size != int(size)):
            msg = f"page_size must be a positive integer or math.inf, got {page_size!r}"
            raise ConfigurationError(msg)

        data = tuple(items)
        total = len(data)
        last = max(1, math.ceil(total / size))

        result: list[StaticPath] = []
        for number in range(1, last + 1):
            start = 0 if math.isinf(size) else (number - 1) * int(size)
            end = total if math.isinf(size) else min(start + int(size), total)
            params = {PAGE_PARAM: _page_value(number)}
            page = Page(
                data=data[start:end],
                start=start,
                end=end - 1,
                total=total,
                size=size,
                current=number,
                last=last,
                url=self._urls(number, last),
            )
            result.append(StaticPath(params=params, props={"page": page}))
        return result

    def _urls(self, number: int, last: int) -> PageUrls:
        generate = self.route.generate
        return PageUrls(
            current=generate({PAGE_PARAM: _page_value(number)}),
            next=None if number == last else generate({PAGE_PARAM: _page_value(number + 1)}),
            prev=None if number == 1 else generate({PAGE_PARAM: _page_value(number - 1)}),
        )


def _page_value(number: int) -> str | None:
    """Page 1 is the bare route; later pages carry their number."""
    return str(number) if number > 1 else None
