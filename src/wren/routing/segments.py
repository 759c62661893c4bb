"""Segment parsing — one directory or file name into typed parts.

A page file name is split on bracket groups::

    "about"          -> [Part("about")]
    "[slug]"         -> [Part("slug", dynamic=True)]
    "post-[id].json" -> [Part("post-"), Part("id", dynamic=True), Part(".json")]
    "[...path]"      -> [Part("...path", dynamic=True, spread=True)]

A bracket group may carry a trailing ``(annotation)``, e.g. ``[id(\\d+)]``.
The annotation is stripped before the name is validated.
"""

import re
from dataclasses import dataclass

from wren.errors import InvalidRoute

# Bracket groups, with an optional parenthesized annotation inside
_SPLIT_RE = re.compile(r"\[(.+?\(.+?\)|.+?)\]")

# Trailing (annotation) on a parameter name
_ANNOTATION_RE = re.compile(r"\(.*\)$")

_PARAM_NAME_RE = re.compile(r"^(\.\.\.)?[A-Za-z0-9_$]+$")

# A rest group with something before or after it in the same segment
_REST_NOT_ALONE_RE = (
    re.compile(r".+\[\.\.\.[^\]]+\]"),
    re.compile(r"\[\.\.\.[^\]]+\].+"),
)

SPREAD_PREFIX = "..."


@dataclass(frozen=True, slots=True)
class Part:
    """One token of a path segment.

    Literal:  ``Part("about")``
    Param:    ``Part("slug", dynamic=True)``
    Rest:     ``Part("...path", dynamic=True, spread=True)``
    """

    content: str
    dynamic: bool = False
    spread: bool = False

    @property
    def name(self) -> str:
        """Parameter name without the rest prefix."""
        if self.spread:
            return self.content[len(SPREAD_PREFIX) :]
        return self.content


def parse_segment(segment: str, file: str) -> tuple[Part, ...]:
    """Parse one path segment into its literal and dynamic parts.

    Raises :class:`InvalidRoute` (carrying *file*) when the segment is
    empty, has adjacent or unbalanced brackets, uses a rest parameter
    alongside other text, or names a parameter with characters outside
    ``[A-Za-z0-9_$]``.
    """
    if not segment:
        raise InvalidRoute(file, "empty path segment")
    if "][" in segment:
        raise InvalidRoute(file, "parameters must be separated")
    if segment.count("[") != segment.count("]"):
        raise InvalidRoute(file, "brackets are unbalanced")
    if any(regex.search(segment) for regex in _REST_NOT_ALONE_RE):
        raise InvalidRoute(file, "rest parameter must be a standalone segment")
    if "[]" in segment:
        raise InvalidRoute(file, "parameter name must match /^[a-zA-Z0-9_$]+$/")

    parts: list[Part] = []
    for i, chunk in enumerate(_SPLIT_RE.split(segment)):
        if not chunk:
            continue
        # split() alternates literal text and captured groups
        dynamic = i % 2 == 1
        if not dynamic:
            parts.append(Part(chunk))
            continue

        content = _ANNOTATION_RE.sub("", chunk)
        if not _PARAM_NAME_RE.match(content):
            raise InvalidRoute(file, "parameter name must match /^[a-zA-Z0-9_$]+$/")
        parts.append(
            Part(content, dynamic=True, spread=content.startswith(SPREAD_PREFIX))
        )
    return tuple(parts)


def is_spread_path(path: str) -> bool:
    """True when *path* contains a rest-parameter marker anywhere."""
    return "[" + SPREAD_PREFIX in path
