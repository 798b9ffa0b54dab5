"""Burrow configuration.

BurrowConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from burrow._errors import ConfigError

DEFAULT_IMPORT_SOURCE = "react-router-dom"


@dataclass(frozen=True, slots=True)
class BurrowConfig:
    """Configuration for a route generation pass.

    Attributes:
        root: Project root directory.  Always resolved to an absolute path
              on construction.
        pages_dir: Directory holding page files, relative to *root* unless
            absolute.
        output_file: Generated routes module, relative to *root* unless
            absolute.
        import_source: Package the generated module imports ``Routes``,
            ``Route`` and ``Outlet`` from.

    """

    root: Path = field(default_factory=Path.cwd)
    pages_dir: str = "src/pages"
    output_file: str = "src/router.tsx"
    import_source: str = DEFAULT_IMPORT_SOURCE

    def __post_init__(self) -> None:
        # watchfiles reports absolute paths, compared via Path.relative_to().
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if not self.import_source:
            msg = "import_source must be a non-empty package name"
            raise ConfigError(msg)

    @property
    def pages_path(self) -> Path:
        """Absolute path to the pages root."""
        path = Path(self.pages_dir)
        if path.is_absolute():
            return path
        return self.root / path

    @property
    def output_path(self) -> Path:
        """Absolute path to the generated routes module."""
        path = Path(self.output_file)
        if path.is_absolute():
            return path
        return self.root / path
