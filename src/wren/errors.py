"""Wren exception hierarchy.

Shared across the manifest builder, matcher, static-path cache, and CLI
so every module raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when site configuration is invalid.

    Typically raised while building the manifest at startup (missing
    pages directory, unusable page extensions).
    """


class InvalidRoute(WrenError):  # noqa: N818
    """A page file name cannot be turned into a route.

    Fatal to the whole manifest build: no partial route table is
    returned. Always carries the offending relative file path.
    """

    def __init__(self, file: str, reason: str) -> None:
        self.file = file
        self.reason = reason
        super().__init__(f"Invalid route {file} — {reason}")


class RouteGenerationError(WrenError, ValueError):
    """A path generator was called without a required parameter."""


@dataclass(frozen=True, slots=True)
class HTTPError(WrenError):
    """An error that maps directly to an HTTP status code.

    Never raised by the matcher itself; typed results convert to these
    via ``to_error()`` when a caller wants to raise.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched, or the matched route does not declare the path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class DuplicatePaginateCall(WrenError):  # noqa: N818
    """``paginate()`` was called more than once in one static-paths pass."""

    def __init__(self, component: str | None = None) -> None:
        self.component = component
        where = f" ({component})" if component else ""
        super().__init__(f"paginate() may only be called once per getStaticPaths pass{where}")


class UpstreamComponentError(WrenError):
    """A component's static-paths provider raised.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, component: str, detail: str = "") -> None:
        self.component = component
        msg = f"getStaticPaths failed for {component}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
