"""RouteData, RouteMatch, and ManifestData frozen dataclasses."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wren.errors import NotFound
from wren.routing.pattern import PathGenerator, Segments

if TYPE_CHECKING:
    from wren.routing.matcher import MatchResult

# A rest parameter the request did not supply is ``None`` (unset)
type Params = dict[str, str | None]


@dataclass(frozen=True, slots=True)
class RouteData:
    """One compiled page route.

    Created by the manifest builder, never mutated afterwards.

    Attributes:
        pattern: Anchored regex matching request paths.
        param_names: Parameter names in capture order (no ``...`` prefix).
        rest_params: The subset of *param_names* that are rest parameters.
        path: Percent-encoded path when the route has no parameters,
            else ``None``.  Always equal to ``generate({})`` when set.
        component: Page file path, relative to the project root.
        segments: The segment tree both *pattern* and *generate* derive from.
        generate: Turns a parameter mapping into a concrete path.
    """

    pattern: re.Pattern[str]
    param_names: tuple[str, ...]
    rest_params: frozenset[str]
    path: str | None
    component: str
    segments: Segments
    generate: PathGenerator

    @property
    def is_dynamic(self) -> bool:
        return self.path is None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: RouteData
    params: Params

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NoMatch:
    """No route pattern accepted the request path. Falsy."""

    path: str

    def __bool__(self) -> bool:
        return False

    def to_error(self) -> NotFound:
        return NotFound(f"No route matches {self.path!r}")


@dataclass(frozen=True, slots=True)
class ManifestData:
    """The ordered route table.

    Order is match priority and is fixed when the manifest is built.
    Consumers never reorder or filter ``routes`` themselves.
    """

    routes: tuple[RouteData, ...] = ()

    def __iter__(self) -> Iterator[RouteData]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    @property
    def components(self) -> tuple[str, ...]:
        return tuple(route.component for route in self.routes)

    @property
    def static_routes(self) -> tuple[RouteData, ...]:
        return tuple(route for route in self.routes if route.path is not None)

    @property
    def dynamic_routes(self) -> tuple[RouteData, ...]:
        return tuple(route for route in self.routes if route.path is None)

    def route_for(self, component: str) -> RouteData | None:
        """Look up the route compiled from *component*."""
        for route in self.routes:
            if route.component == component:
                return route
        return None

    def match(self, path: str) -> MatchResult:
        """Match *path* against the table. See :func:`~wren.routing.matcher.match_route`."""
        from wren.routing.matcher import match_route

        return match_route(self.routes, path)
