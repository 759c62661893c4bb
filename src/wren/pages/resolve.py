"""Request resolution and static-path enumeration.

Combines the matcher with the static-path cache:

1. Match the request path against the route table (first match wins).
2. Literal routes resolve immediately.
3. Dynamic routes resolve only when the extracted params are among the
   component's declared static paths, so the dev server never serves a
   page the static build would not produce.

Misses are returned as :class:`PageNotFound` values, not raised.  A
failing ``get_static_paths`` propagates as
:class:`~wren.errors.UpstreamComponentError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from wren.errors import NotFound
from wren.pages.static_paths import StaticPathCache
from wren.routing.matcher import match_route
from wren.routing.route import ManifestData, Params, RouteData

logger = logging.getLogger("wren.resolve")


@dataclass(frozen=True, slots=True)
class ResolvedPage:
    """A request path resolved to one route and its props."""

    route: RouteData
    params: Params
    props: Mapping[str, Any] = field(default_factory=dict)

    @property
    def component(self) -> str:
        return self.route.component


@dataclass(frozen=True, slots=True)
class PageNotFound:
    """No page serves the request path. Falsy."""

    path: str
    reason: str = "No matching route found."
    route: RouteData | None = None

    def __bool__(self) -> bool:
        return False

    def to_error(self) -> NotFound:
        return NotFound(self.reason)


type Resolution = ResolvedPage | PageNotFound


async def resolve_page(
    manifest: ManifestData,
    cache: StaticPathCache,
    path: str,
) -> ResolvedPage | PageNotFound:
    """Resolve *path* to a page.

    Args:
        manifest: The current route table.
        cache: Static-path cache consulted for dynamic routes.
        path: Request path (without query string).

    Returns:
        :class:`ResolvedPage` on success, :class:`PageNotFound` otherwise.
    """
    match = match_route(manifest.routes, path)
    if not match:
        return PageNotFound(path)

    route = match.route
    if route.path is not None:
        return ResolvedPage(route=route, params=match.params)

    static_paths = await cache.get(route)
    declared = static_paths.find(match.params)
    if declared is None:
        logger.debug("%s matched %s but is not a declared static path", path, route.component)
        return PageNotFound(
            path,
            reason=f"[getStaticPaths] route matched, but matching static path not found. ({path})",
            route=route,
        )
    return ResolvedPage(route=route, params=match.params, props=declared.props)


async def paths_for_route(route: RouteData, cache: StaticPathCache) -> list[str]:
    """Every concrete path *route* produces, in declaration order."""
    if route.path is not None:
        return [route.path]
    static_paths = await cache.get(route)
    return [route.generate(static_path.params) for static_path in static_paths.paths]


async def enumerate_paths(manifest: ManifestData, cache: StaticPathCache) -> list[str]:
    """Every concrete path the site produces, in route-table order.

    This is what a static build writes out.
    """
    paths: list[str] = []
    for route in manifest.routes:
        paths.extend(await paths_for_route(route, cache))
    return paths
