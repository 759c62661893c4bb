"""``wren routes`` — list routes in match-priority order.

Builds the manifest for a pages directory and prints a table of
position, pattern (or literal path), parameters, and component.
"""

import argparse

from wren.cli._resolve import load_manifest


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table for ``args.pages``."""
    manifest = load_manifest(args, args.pages)

    if not manifest.routes:
        print("No routes found.")
        return

    # Build rows: (position, path-or-pattern, params, component)
    rows: list[tuple[str, str, str, str]] = []
    for position, route in enumerate(manifest.routes, start=1):
        shown = route.path if route.path is not None else route.pattern.pattern
        params = ", ".join(
            f"...{name}" if name in route.rest_params else name for name in route.param_names
        )
        rows.append((str(position), shown, params or "-", route.component))

    headers = ("#", "ROUTE", "PARAMS", "COMPONENT")
    widths = [max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(3)]

    fmt = f"{{:>{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*headers))
    sep_len = sum(widths) + 6 + max(len(row[3]) for row in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
