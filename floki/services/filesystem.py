"""Local filesystem implementation of IFileSystem."""

from pathlib import Path

from ..core.interfaces.filesystem import IFileSystem


class LocalFileSystem(IFileSystem):
    """Answers directory queries relative to a root (default: process cwd)."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root

    def directory_exists(self, name: str) -> bool:
        path = Path(name) if self._root is None else self._root / name
        # is_dir() follows symlinks, so a dangling link counts as missing
        return path.is_dir()
