"""Site configuration.

SiteConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from wren.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(project_root="site", page_extensions=(".astro",))
    """

    # Layout
    project_root: str | Path = "."
    pages_dir: str | Path = "src/pages"  # Relative to project_root unless absolute

    # Discovery
    page_extensions: tuple[str, ...] = (".astro", ".md", ".html")
    well_known: str = ".well-known"  # The one hidden directory that is routed

    # Matching
    trailing_slash: bool = True  # Matchers accept one optional trailing slash

    # Pagination
    page_size: int = 10

    def __post_init__(self) -> None:
        for ext in self.page_extensions:
            if not ext.startswith(".") or len(ext) < 2:
                msg = f"Page extensions must look like '.astro', got {ext!r}"
                raise ConfigurationError(msg)
        if self.page_size < 1:
            msg = f"page_size must be positive, got {self.page_size}"
            raise ConfigurationError(msg)

    @property
    def root_path(self) -> Path:
        return Path(self.project_root)

    @property
    def pages_path(self) -> Path:
        """The pages directory, resolved against ``project_root``."""
        return self.root_path / self.pages_dir
