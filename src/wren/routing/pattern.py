"""Pattern compilation — one segment tree, two artifacts.

Every route is described by its segment tree (a tuple of :class:`Part`
tuples, one per path segment).  :func:`compile_segments` walks that tree
once and derives both:

- an anchored regex that matches decoded request paths (see
  :func:`~wren.routing.matcher.decode_path`) and captures parameters,
- a :class:`PathGenerator` that turns a parameter mapping back into a
  percent-encoded path.

Both artifacts start from the same :func:`encode_literal` text, so they
never disagree on what a filename means.
"""

import re
import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote

from wren.errors import RouteGenerationError
from wren.routing.segments import Part

type Segments = tuple[tuple[Part, ...], ...]

# Regex fragments
_PARAM_GROUP = "([^/]+?)"
_REST_GROUP = "(?:/(.*?))?"


def encode_literal(text: str) -> str:
    """Normalize literal route text into its decoded-path form.

    This is the form :func:`~wren.routing.matcher.decode_path` produces
    from a request: everything decoded except ``%``, ``?`` and ``#``,
    which stay percent-encoded.  Percent-encoded brackets are restored to
    the bracket characters a filename cannot otherwise contain.
    """
    return (
        unicodedata.normalize("NFC", text)
        .replace("%5B", "[")
        .replace("%5D", "]")
        .replace("%", "%25")
        .replace("?", "%3F")
        .replace("#", "%23")
    )


@dataclass(frozen=True, slots=True)
class _Token:
    """One generator template token: literal text or a placeholder."""

    text: str
    param: str | None = None
    rest: bool = False


class PathGenerator:
    """Fill a route's placeholders from a parameter mapping.

    Usage::

        generate = PathGenerator(segments)
        generate({"slug": "hello"})  # "/blog/hello"

    Named parameters are required.  Rest parameters are optional: a
    ``None`` or empty value omits the whole segment.  The result is
    percent-encoded; rest values keep their ``/`` separators.
    """

    __slots__ = ("_segments", "params")

    def __init__(self, segments: Segments) -> None:
        compiled: list[tuple[_Token, ...]] = []
        names: list[str] = []
        for segment in segments:
            tokens: list[_Token] = []
            for part in segment:
                if part.dynamic:
                    tokens.append(_Token("", param=part.name, rest=part.spread))
                    names.append(part.name)
                else:
                    # Escapes already in the literal are kept as-is
                    tokens.append(_Token(quote(encode_literal(part.content), safe="%")))
            compiled.append(tuple(tokens))
        self._segments: tuple[tuple[_Token, ...], ...] = tuple(compiled)
        self.params: tuple[str, ...] = tuple(names)

    def __call__(self, params: Mapping[str, object] | None = None) -> str:
        values = _clean_params(params or {})
        pieces: list[str] = []
        for segment in self._segments:
            first = segment[0]
            if first.rest:
                value = values.get(first.param or "")
                if value is None:
                    continue
                pieces.append("/" + quote(value, safe="/"))
                continue

            text: list[str] = []
            for token in segment:
                if token.param is None:
                    text.append(token.text)
                    continue
                value = values.get(token.param)
                if value is None:
                    msg = f"Expected parameter {token.param!r} to generate a path"
                    raise RouteGenerationError(msg)
                text.append(quote(value, safe=""))
            pieces.append("/" + "".join(text))
        return "".join(pieces) or "/"

    def __repr__(self) -> str:
        return f"PathGenerator(params={self.params!r})"


def _clean_params(params: Mapping[str, object]) -> dict[str, str]:
    """Drop unset values and stringify the rest."""
    return {
        key: str(value)
        for key, value in params.items()
        if value is not None and value != ""
    }


def compile_segments(
    segments: Segments,
    *,
    trailing_slash: bool = True,
) -> tuple[re.Pattern[str], PathGenerator]:
    """Compile a segment tree into its matcher and generator.

    Args:
        segments: One tuple of parts per path segment, root first.
        trailing_slash: Let the matcher accept a single trailing ``/``.
            Generated paths never carry one.

    Returns:
        ``(pattern, generator)`` agreeing on parameter names and order.
    """
    source: list[str] = []
    for segment in segments:
        if segment[0].spread:
            source.append(_REST_GROUP)
            continue
        source.append("/")
        for part in segment:
            if part.dynamic:
                source.append(_PARAM_GROUP)
            else:
                source.append(re.escape(encode_literal(part.content)))

    body = "".join(source) or "/"
    trailing = "/?$" if trailing_slash and segments else "$"
    return re.compile(f"^{body}{trailing}"), PathGenerator(segments)
