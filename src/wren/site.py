"""Site runtime — the manifest, the static-path cache, and file-watch hooks.

One :class:`Site` owns everything request handling reads:

- the current :class:`ManifestData`, rebuilt wholesale on tree changes
- the :class:`StaticPathCache`, invalidated one component at a time

The file watcher itself is an external collaborator; it calls
:meth:`Site.tree_changed` and :meth:`Site.file_changed`.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from wren.config import SiteConfig
from wren.errors import InvalidRoute
from wren.pages.discovery import build_manifest, component_base
from wren.pages.resolve import PageNotFound, ResolvedPage, enumerate_paths, resolve_page
from wren.pages.static_paths import ComponentLoader, StaticPathCache
from wren.routing.route import ManifestData

logger = logging.getLogger("wren.site")


class Site:
    """Routing state for one site.

    Usage::

        site = Site(SiteConfig(project_root="."), loader=load_component)
        result = await site.resolve("/blog/hello")

    Thread safety:
        The manifest is an immutable value swapped under a Lock on
        rebuild; readers always see either the old or the new table.
    """

    __slots__ = ("_manifest", "_rebuild_lock", "cache", "config")

    def __init__(self, config: SiteConfig | None = None, *, loader: ComponentLoader) -> None:
        self.config: SiteConfig = config or SiteConfig()
        self.cache = StaticPathCache(loader, page_size=self.config.page_size)
        self._rebuild_lock = threading.Lock()
        self._manifest: ManifestData = build_manifest(config=self.config)

    @property
    def manifest(self) -> ManifestData:
        return self._manifest

    def rebuild(self) -> ManifestData:
        """Rebuild the manifest from disk.

        On :class:`InvalidRoute` the previous manifest stays in place and
        the error is re-raised.
        """
        with self._rebuild_lock:
            try:
                manifest = build_manifest(config=self.config)
            except InvalidRoute as exc:
                logger.warning("Keeping previous route manifest: %s", exc)
                raise
            self._manifest = manifest
        return manifest

    async def resolve(self, path: str) -> ResolvedPage | PageNotFound:
        return await resolve_page(self._manifest, self.cache, path)

    async def enumerate_paths(self) -> list[str]:
        return await enumerate_paths(self._manifest, self.cache)

    # -- File-watch notifications --

    def tree_changed(self) -> ManifestData:
        """A page was added, removed, or renamed."""
        manifest = self.rebuild()
        self.cache.clear()
        return manifest

    def file_changed(self, path: str | Path) -> bool:
        """A page file's contents changed; drop its cached static paths."""
        component = self.component_key(path)
        return self.cache.invalidate(component)

    def component_key(self, path: str | Path) -> str:
        """Map a watcher path to the relative key used as ``component``."""
        candidate = Path(path)
        if not candidate.is_absolute():
            return candidate.as_posix()
        base = component_base(self.config.pages_path.resolve(), self.config)
        resolved = candidate.resolve()
        if resolved.is_relative_to(base):
            return resolved.relative_to(base).as_posix()
        return resolved.as_posix()
