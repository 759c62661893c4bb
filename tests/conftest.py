"""Shared fixtures: on-disk page trees and hand-compiled routes."""

from collections.abc import Callable
from pathlib import Path

import pytest

from wren.config import SiteConfig
from wren.routing.pattern import compile_segments
from wren.routing.route import RouteData
from wren.routing.segments import parse_segment


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """An empty project root with a ``src/pages`` directory."""
    (tmp_path / "src" / "pages").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def make_pages(site_root: Path) -> Callable[..., SiteConfig]:
    """Create page files under ``src/pages`` and return a matching config.

    Usage::

        config = make_pages("index.astro", "blog/[slug].astro")
    """

    def _make(*files: str, **overrides: object) -> SiteConfig:
        pages = site_root / "src" / "pages"
        for name in files:
            path = pages / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("---\n---\n", encoding="utf-8")
        return SiteConfig(project_root=site_root, **overrides)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def compile_route() -> Callable[..., RouteData]:
    """Compile a route from segment names without touching the filesystem.

    Usage::

        route = compile_route("blog", "[...page]")
    """

    def _compile(*names: str, component: str = "src/pages/test.astro") -> RouteData:
        segments = tuple(parse_segment(name, component) for name in names)
        pattern, generate = compile_segments(segments)
        static = all(len(s) == 1 and not s[0].dynamic for s in segments)
        return RouteData(
            pattern=pattern,
            param_names=generate.params,
            rest_params=frozenset(p.name for s in segments for p in s if p.spread),
            path="/" + "/".join(s[0].content for s in segments) if static else None,
            component=component,
            segments=segments,
            generate=generate,
        )

    return _compile
