"""Filesystem route discovery for the pages/ directory.

Walks the pages directory tree and turns every page file into a compiled
:class:`RouteData`:

- ``index.*`` maps to the directory URL
- ``index.json.astro`` folds ``.json`` into the directory segment
  (``/feed.json``, not ``/feed/.json``)
- ``[name]`` in a file or directory name becomes a path parameter
- ``[...name]`` becomes a rest parameter spanning any number of segments

Siblings are sorted by specificity before the walk descends, so the
depth-first visiting order is exactly the match priority of the table.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from wren.config import SiteConfig
from wren.errors import ConfigurationError, InvalidRoute
from wren.routing.pattern import Segments, compile_segments
from wren.routing.route import ManifestData, RouteData
from wren.routing.segments import Part, parse_segment
from wren.routing.specificity import Item, sort_items

logger = logging.getLogger("wren.manifest")

# A well-formed file extension chain (filters editor temp files etc.)
_EXT_RE = re.compile(r"^(\.[a-z0-9]+)+$", re.IGNORECASE)


def build_manifest(
    pages_dir: str | Path | None = None,
    *,
    config: SiteConfig | None = None,
) -> ManifestData:
    """Walk a pages directory and compile the ordered route table.

    Args:
        pages_dir: Path to the pages directory.  Defaults to
            ``config.pages_path``.
        config: Site configuration.  Component paths are made relative
            to ``config.project_root`` when the pages directory lives
            inside it, otherwise to the pages directory itself.

    Returns:
        The complete :class:`ManifestData`.

    Raises:
        InvalidRoute: Any file name that cannot be a route.  The whole
            build aborts; no partial manifest is returned.
        ConfigurationError: The pages directory does not exist.
    """
    config = config or SiteConfig()
    root = Path(pages_dir if pages_dir is not None else config.pages_path).resolve()
    if not root.is_dir():
        raise ConfigurationError(f"Pages directory not found: {root}")

    base = component_base(root, config)
    routes: list[RouteData] = []
    _walk_directory(
        root,
        base,
        config=config,
        parent_segments=(),
        parent_params=(),
        routes=routes,
    )
    logger.info("Built route manifest: %d routes from %s", len(routes), root)
    return ManifestData(routes=tuple(routes))


def component_base(pages_root: Path, config: SiteConfig) -> Path:
    """Directory that component paths are relative to."""
    project_root = config.root_path.resolve()
    return project_root if pages_root.is_relative_to(project_root) else pages_root


def _walk_directory(
    directory: Path,
    base: Path,
    *,
    config: SiteConfig,
    parent_segments: Segments,
    parent_params: tuple[str, ...],
    routes: list[RouteData],
) -> None:
    """Recursively walk a directory, compiling routes in specificity order.

    Args:
        directory: Current directory being walked.
        base: Directory component paths are made relative to.
        config: Site configuration.
        parent_segments: Segment tree accumulated from parent directories.
        parent_params: Parameter names accumulated from parent directories.
        routes: Accumulator for compiled routes.
    """
    items = [
        item
        for entry in directory.iterdir()
        if (item := _make_item(entry, base, config)) is not None
    ]

    for item in sort_items(items):
        segments = _child_segments(parent_segments, item)
        params = (*parent_params, *(p.name for p in item.parts if p.dynamic))
        duplicates = {name for name in params if params.count(name) > 1}
        if duplicates:
            raise InvalidRoute(
                item.file, f"duplicate parameter name {sorted(duplicates)[0]!r}"
            )

        if item.is_dir:
            _walk_directory(
                directory / item.basename,
                base,
                config=config,
                parent_segments=segments,
                parent_params=params,
                routes=routes,
            )
        elif item.is_page:
            routes.append(_compile_route(item, segments, params, config))


def _make_item(entry: Path, base: Path, config: SiteConfig) -> Item | None:
    """Build an :class:`Item` for *entry*, or ``None`` if it is not routed."""
    basename = entry.name
    if basename.startswith(".") and basename != config.well_known:
        return None

    is_dir = entry.is_dir()
    ext = entry.suffix
    file = entry.relative_to(base).as_posix()

    if not is_dir:
        if not _EXT_RE.match(ext):
            return None  # temp files etc.
        if ext not in config.page_extensions:
            return None

    segment = basename if is_dir else basename[: -len(ext)]
    parts = parse_segment(segment, file)

    is_index = not is_dir and basename.startswith("index.")
    first_dot = basename.find(".")
    route_suffix = "" if is_dir else basename[first_dot : len(basename) - len(ext)]

    return Item(
        basename=basename,
        ext=ext,
        parts=parts,
        file=file,
        is_dir=is_dir,
        is_index=is_index,
        is_page=not is_dir,
        route_suffix=route_suffix,
    )


def _child_segments(parent: Segments, item: Item) -> Segments:
    """Append *item*'s segment to *parent*, folding index route suffixes.

    A plain ``index`` file adds nothing.  An index with a suffix
    (``index.json``) extends the last existing segment instead of
    starting a new one.
    """
    if not item.is_index:
        return (*parent, item.parts)
    if not item.route_suffix:
        return parent
    if not parent:
        return (item.parts,)

    last = list(parent[-1])
    last_part = last[-1]
    if last[0].spread:
        raise InvalidRoute(item.file, "route suffix cannot follow a rest parameter")
    if last_part.dynamic:
        last.append(Part(item.route_suffix))
    else:
        last[-1] = Part(last_part.content + item.route_suffix)
    return (*parent[:-1], tuple(last))


def _compile_route(
    item: Item,
    segments: Segments,
    params: tuple[str, ...],
    config: SiteConfig,
) -> RouteData:
    pattern, generate = compile_segments(segments, trailing_slash=config.trailing_slash)
    rest_params = frozenset(
        part.name for segment in segments for part in segment if part.spread
    )
    static = all(len(segment) == 1 and not segment[0].dynamic for segment in segments)
    path = generate({}) if static else None

    route = RouteData(
        pattern=pattern,
        param_names=params,
        rest_params=rest_params,
        path=path,
        component=item.file,
        segments=segments,
        generate=generate,
    )
    logger.debug("route %s -> %s", pattern.pattern, item.file)
    return route
