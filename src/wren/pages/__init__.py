"""Filesystem-based page routing.

The ``pages/`` directory structure defines URL paths::

    src/pages/
      index.astro            # /
      about.astro            # /about
      feed.xml.astro         # /feed.xml
      blog/
        index.json.astro     # /blog.json
        [slug].astro         # /blog/:slug
        [...page].astro      # /blog, /blog/2, /blog/3, ...
      docs/
        [...path].astro      # /docs/anything/below

Routes are ordered by specificity at build time and matched first-wins
at request time.  Dynamic routes declare their valid parameter values
through ``get_static_paths``.
"""

from wren.pages.discovery import build_manifest
from wren.pages.paginate import Page, PageUrls, Paginator
from wren.pages.resolve import (
    PageNotFound,
    ResolvedPage,
    enumerate_paths,
    paths_for_route,
    resolve_page,
)
from wren.pages.static_paths import (
    StaticPath,
    StaticPathCache,
    StaticPathSet,
    StaticPathsContext,
    StaticPathsProvider,
)

__all__ = [
    "Page",
    "PageNotFound",
    "PageUrls",
    "Paginator",
    "ResolvedPage",
    "StaticPath",
    "StaticPathCache",
    "StaticPathSet",
    "StaticPathsContext",
    "StaticPathsProvider",
    "build_manifest",
    "enumerate_paths",
    "paths_for_route",
    "resolve_page",
]
