"""Wren — file-based route manifests for static sites.

Turns a directory of page files into an ordered, deterministic route
table, matches request paths against it, and expands dynamic routes into
their declared (optionally paginated) static paths.

Basic usage::

    from wren import build_manifest

    manifest = build_manifest("src/pages")
    match = manifest.match("/blog/hello")
    if match:
        print(match.route.component, match.params)

With static paths::

    from wren import Site, SiteConfig

    site = Site(SiteConfig(project_root="."), loader=load_component)
    result = await site.resolve("/blog/2")
"""

from importlib import import_module

__version__ = "0.1.0.dev0"

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "wren.errors",
    "DuplicatePaginateCall": "wren.errors",
    "InvalidRoute": "wren.errors",
    "ManifestData": "wren.routing.route",
    "NoMatch": "wren.routing.route",
    "NotFound": "wren.errors",
    "Page": "wren.pages.paginate",
    "PageNotFound": "wren.pages.resolve",
    "ResolvedPage": "wren.pages.resolve",
    "RouteData": "wren.routing.route",
    "RouteMatch": "wren.routing.route",
    "Site": "wren.site",
    "SiteConfig": "wren.config",
    "StaticPath": "wren.pages.static_paths",
    "StaticPathCache": "wren.pages.static_paths",
    "StaticPathsContext": "wren.pages.static_paths",
    "UpstreamComponentError": "wren.errors",
    "WrenError": "wren.errors",
    "build_manifest": "wren.pages.discovery",
    "match_route": "wren.routing.matcher",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
