"""Route specificity — the total order over sibling directory entries.

Siblings are sorted before the walk descends, so the order decided here
is both the processing order and, transitively, the match priority of
the final route table (first match wins).  Literal routes come before
parameterized routes, which come before rest (catch-all) routes; longer
literal text beats shorter.
"""

from dataclasses import dataclass
from functools import cmp_to_key

from wren.routing.segments import Part, is_spread_path


@dataclass(frozen=True, slots=True)
class Item:
    """One filesystem entry visited during the manifest walk.

    Attributes:
        basename: Entry name, extension included.
        ext: Final extension (``".astro"``), empty for most directories.
        parts: Parsed parts of the segment this entry contributes.
        file: POSIX path relative to the project root.
        is_dir: Entry is a directory.
        is_index: File whose name starts with ``index.``.
        is_page: File with a recognised page extension.
        route_suffix: Qualifier between the first dot and the extension,
            e.g. ``".json"`` for ``index.json.astro``.
    """

    basename: str
    ext: str
    parts: tuple[Part, ...]
    file: str
    is_dir: bool = False
    is_index: bool = False
    is_page: bool = False
    route_suffix: str = ""


def compare_items(a: Item, b: Item) -> int:
    """Three-way comparison of two sibling items (negative: *a* first)."""
    if a.is_index != b.is_index:
        if a.is_index:
            return 1 if is_spread_path(a.file) else -1
        return -1 if is_spread_path(b.file) else 1

    for i in range(max(len(a.parts), len(b.parts))):
        if i >= len(a.parts):
            return 1  # b is more specific
        if i >= len(b.parts):
            return -1

        a_part = a.parts[i]
        b_part = b.parts[i]

        if a_part.spread and b_part.spread:
            return 1 if a.is_index else -1

        if a_part.spread != b_part.spread:
            return 1 if a_part.spread else -1

        if a_part.dynamic != b_part.dynamic:
            return 1 if a_part.dynamic else -1

        if not a_part.dynamic and a_part.content != b_part.content:
            longer = len(b_part.content) - len(a_part.content)
            if longer:
                return longer
            return -1 if a_part.content < b_part.content else 1

    if a.is_page != b.is_page:
        return -1 if a.is_page else 1

    if a.file == b.file:
        return 0
    return -1 if a.file < b.file else 1


def sort_items(items: list[Item]) -> list[Item]:
    """Sort sibling items by specificity.

    Items are name-sorted first so the result never depends on the order
    the filesystem happened to list them in.
    """
    by_name = sorted(items, key=lambda item: item.basename)
    return sorted(by_name, key=cmp_to_key(compare_items))
