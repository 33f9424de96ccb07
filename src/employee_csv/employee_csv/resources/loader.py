from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol, Union

from ..core.exceptions import SourceNotFound

BUNDLED_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


class ResourceLoader(Protocol):
    def open(self, name: str) -> BinaryIO:
        """Open `name` for reading. Raises SourceNotFound if it does not exist."""
        raise NotImplementedError


class DirectoryResourceLoader(ResourceLoader):
    """Resolves logical names relative to a base directory.

    Absolute names are used as-is.
    """

    def __init__(self, base_dir: Union[str, Path]):
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def resolve(self, name: str) -> Path:
        path = Path(name)
        return path if path.is_absolute() else self._base_dir / path

    def open(self, name: str) -> BinaryIO:
        path = self.resolve(name)
        if not path.is_file():
            raise SourceNotFound(name)
        try:
            return path.open("rb")
        except FileNotFoundError:
            # Removed between the check and the open.
            raise SourceNotFound(name) from None


def bundled_loader() -> DirectoryResourceLoader:
    """Loader for the sample files shipped inside the package."""
    return DirectoryResourceLoader(BUNDLED_DATA_DIR)
