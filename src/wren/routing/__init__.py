"""Routing — segment parsing, specificity ordering, pattern compilation, matching.

The manifest builder produces an immutable, ordered route table from
these pieces; the matcher reads it without ever mutating it.
"""

from wren.routing.matcher import extract_params, match_route
from wren.routing.pattern import PathGenerator, compile_segments, encode_literal
from wren.routing.route import ManifestData, NoMatch, Params, RouteData, RouteMatch
from wren.routing.segments import Part, parse_segment
from wren.routing.specificity import Item, compare_items, sort_items

__all__ = [
    "Item",
    "ManifestData",
    "NoMatch",
    "Params",
    "Part",
    "PathGenerator",
    "RouteData",
    "RouteMatch",
    "compare_items",
    "compile_segments",
    "encode_literal",
    "extract_params",
    "match_route",
    "parse_segment",
    "sort_items",
]
