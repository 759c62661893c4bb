"""Request matching — first route in table order wins.

The manifest's order is the sole source of truth for precedence, so
overlapping patterns resolve the same way on every request.
"""

import logging
import re
from collections.abc import Iterable, Sequence
from urllib.parse import unquote

from wren.routing.route import NoMatch, Params, RouteData, RouteMatch

logger = logging.getLogger("wren.resolve")

type MatchResult = RouteMatch | NoMatch

# Escapes that survive decode_path: / ? # and % itself
_KEPT_ESCAPE_RE = re.compile(r"(%(?:2[Ff]|3[Ff]|23|25))")


def decode_path(path: str) -> str:
    """Decode a request path into the form route patterns are compiled against.

    Every percent-escape is decoded except ``%2F``, ``%3F``, ``%23`` and
    ``%25``: decoding those would change where segments split, or let a
    captured value be decoded twice.  Kept escapes are upper-cased.

    Usage::

        decode_path("/caf%C3%A9/a%2Fb")  # "/café/a%2Fb"
    """
    pieces = _KEPT_ESCAPE_RE.split(path)
    return "".join(
        piece.upper() if i % 2 else unquote(piece) for i, piece in enumerate(pieces)
    )


def extract_params(route: RouteData, match: re.Match[str]) -> Params:
    """Correlate capture groups with the route's parameter names.

    Captured values are percent-decoded.  A rest parameter with no (or an
    empty) capture is reported as ``None`` rather than ``""``.
    """
    params: Params = {}
    groups: Sequence[str | None] = match.groups()
    for name, value in zip(route.param_names, groups, strict=True):
        if name in route.rest_params:
            params[name] = unquote(value) if value else None
        else:
            params[name] = unquote(value or "")
    return params


def match_route(routes: Iterable[RouteData], request_path: str) -> RouteMatch | NoMatch:
    """Find the first route whose pattern accepts *request_path*.

    Returns a :class:`RouteMatch` with decoded parameters, or a falsy
    :class:`NoMatch`.  Never raises for an unknown path.  *request_path*
    may be percent-encoded (as received over HTTP) or already decoded.
    """
    path = decode_path(request_path)
    for route in routes:
        found = route.pattern.match(path)
        if found is None:
            continue
        params = extract_params(route, found)
        logger.debug("%s -> %s %r", request_path, route.component, params)
        return RouteMatch(route=route, params=params)

    logger.debug("%s -> no route", request_path)
    return NoMatch(request_path)
