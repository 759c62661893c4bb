"""Build a manifest from CLI arguments, reporting failures the CLI way."""

import argparse
import sys

from wren.config import SiteConfig
from wren.errors import ConfigurationError, InvalidRoute
from wren.pages.discovery import build_manifest
from wren.routing.route import ManifestData


def load_manifest(args: argparse.Namespace, pages: str) -> ManifestData:
    """Build the manifest for *pages*, exiting with status 1 on failure."""
    try:
        config = SiteConfig(project_root=args.root, pages_dir=pages)
        return build_manifest(pages, config=config)
    except (ConfigurationError, InvalidRoute) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
