"""``wren match`` — show which route serves a request path."""

import argparse
import sys

from wren.cli._resolve import load_manifest


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.path`` and print the component and parameters.

    Static paths are not consulted (that needs the components themselves),
    so a dynamic match only means the pattern accepts the path.
    """
    manifest = load_manifest(args, args.pages)
    match = manifest.match(args.path)
    if not match:
        print(f"No route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    route = match.route
    print(f"component: {route.component}")
    print(f"pattern:   {route.pattern.pattern}")
    for name, value in match.params.items():
        shown = "(unset)" if value is None else value
        print(f"  {name} = {shown}")
