"""Static paths — which parameter values a dynamic route actually serves.

Matching a pattern does not certify the captured values: ``/blog/[slug]``
matches ``/blog/anything``.  Each dynamic-route component therefore
declares its valid parameter combinations through a provider::

    class BlogPost:
        def get_static_paths(self, context: StaticPathsContext):
            return [{"params": {"slug": "hello"}, "props": {"title": "Hello"}}]

:class:`StaticPathCache` calls each provider at most once per component
(until invalidated) and indexes the result for lookups by extracted
params.

Thread safety:
    Cache bookkeeping is guarded by a ``threading.Lock`` so file-watch
    invalidations may arrive from another thread.  Concurrent first
    access to one key is single-flight: later callers wait on the
    in-flight computation's ``anyio.Event``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import anyio

from wren._internal.invoke import invoke
from wren.errors import DuplicatePaginateCall, UpstreamComponentError
from wren.pages.paginate import DEFAULT_PAGE_SIZE, Paginator
from wren.routing.route import RouteData

logger = logging.getLogger("wren.cache")

type ParamsKey = frozenset[tuple[str, str]]


@dataclass(frozen=True, slots=True)
class StaticPath:
    """One parameter combination a component wants generated."""

    params: Mapping[str, Any]
    props: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class StaticPathsContext:
    """What a provider receives: the one-shot ``paginate`` helper."""

    paginate: Paginator


@runtime_checkable
class StaticPathsProvider(Protocol):
    """A dynamic-route component's static-paths capability."""

    def get_static_paths(
        self, context: StaticPathsContext
    ) -> Iterable[StaticPath | Mapping[str, Any]] | Awaitable[
        Iterable[StaticPath | Mapping[str, Any]]
    ]: ...


# component path -> provider
type ComponentLoader = Callable[[str], StaticPathsProvider]


def params_key(params: Mapping[str, Any]) -> ParamsKey:
    """Normalize a parameter mapping for comparison.

    Unset values (``None`` or ``""``) are dropped and the rest are
    stringified, so ``{"page": None}`` and ``{}`` compare equal.
    """
    return frozenset(
        (key, str(value)) for key, value in params.items() if value is not None and value != ""
    )


@dataclass(frozen=True, slots=True)
class StaticPathSet:
    """A component's declared static paths, indexed by normalized params."""

    component: str
    paths: tuple[StaticPath, ...]
    _index: dict[ParamsKey, StaticPath] = field(repr=False, compare=False)

    @classmethod
    def build(cls, component: str, entries: Iterable[StaticPath | Mapping[str, Any]]) -> StaticPathSet:
        paths = tuple(_coerce_entry(component, entry) for entry in entries)
        index: dict[ParamsKey, StaticPath] = {}
        for path in paths:
            # First declaration wins, like a linear scan would
            index.setdefault(params_key(path.params), path)
        return cls(component=component, paths=paths, _index=index)

    def __len__(self) -> int:
        return len(self.paths)

    def find(self, params: Mapping[str, Any]) -> StaticPath | None:
        return self._index.get(params_key(params))


def _coerce_entry(component: str, entry: StaticPath | Mapping[str, Any]) -> StaticPath:
    if isinstance(entry, StaticPath):
        return entry
    if isinstance(entry, Mapping) and isinstance(entry.get("params"), Mapping):
        return StaticPath(params=entry["params"], props=entry.get("props") or {})
    raise UpstreamComponentError(
        component, f"static path entries need a 'params' mapping, got {entry!r}"
    )


@dataclass(slots=True)
class _InFlight:
    """A computation other callers can wait on."""

    done: anyio.Event
    result: StaticPathSet | None = None
    error: BaseException | None = None


class StaticPathCache:
    """Per-component memo of declared static paths.

    Owned by the site runtime and passed to the resolver by reference;
    there is no module-level cache.

    Usage::

        cache = StaticPathCache(loader)
        paths = await cache.get(route)
        cache.invalidate(route.component)  # from the file watcher
    """

    __slots__ = ("_entries", "_in_flight", "_lock", "loader", "page_size")

    def __init__(self, loader: ComponentLoader, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.loader = loader
        self.page_size = page_size
        self._entries: dict[str, StaticPathSet] = {}
        self._in_flight: dict[str, _InFlight] = {}
        self._lock = threading.Lock()

    def __contains__(self, component: object) -> bool:
        with self._lock:
            return component in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    async def get(self, route: RouteData) -> StaticPathSet:
        """Return the static paths for *route*'s component, computing once.

        Raises:
            UpstreamComponentError: The provider raised or returned
                malformed entries.  Failures are not cached.
            DuplicatePaginateCall: The provider called ``paginate`` twice.
        """
        key = route.component
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                return cached
            waiting = self._in_flight.get(key)
            if waiting is None:
                flight = _InFlight(done=anyio.Event())
                self._in_flight[key] = flight

        if waiting is not None:
            await waiting.done.wait()
            if isinstance(waiting.error, Exception):
                raise waiting.error
            if waiting.result is None:
                # The computing task was cancelled; take over
                return await self.get(route)
            return waiting.result

        try:
            result = await self._compute(route)
        except BaseException as exc:
            flight.error = exc
            raise
        else:
            flight.result = result
        finally:
            with self._lock:
                # An invalidated flight is no longer registered under its key
                published = self._in_flight.get(key) is flight and flight.result is not None
                if self._in_flight.get(key) is flight:
                    del self._in_flight[key]
                if published:
                    self._entries[key] = flight.result
            if flight.result is not None and not published:
                logger.debug("discarding static paths for %s: invalidated mid-flight", key)
            flight.done.set()
        return result

    async def _compute(self, route: RouteData) -> StaticPathSet:
        component = route.component
        logger.debug("computing static paths for %s", component)
        context = StaticPathsContext(paginate=Paginator(route, default_size=self.page_size))
        try:
            provider = self.loader(component)
            entries = list(await invoke(provider.get_static_paths, context))
        except DuplicatePaginateCall:
            raise
        except Exception as exc:
            raise UpstreamComponentError(component, str(exc)) from exc
        return StaticPathSet.build(component, entries)

    def invalidate(self, component: str) -> bool:
        """Drop one component's entry.

        A computation in flight for *component* finishes for the callers
        already waiting on it but is never published.  Returns ``True``
        when there was anything to drop.
        """
        with self._lock:
            had_entry = self._entries.pop(component, None) is not None
            had_flight = self._in_flight.pop(component, None) is not None
        if had_entry or had_flight:
            logger.debug("invalidated static paths for %s", component)
        return had_entry or had_flight

    def clear(self) -> None:
        """Drop every entry and orphan every in-flight computation."""
        with self._lock:
            self._entries.clear()
            self._in_flight.clear()
