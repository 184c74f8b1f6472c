# src/infrastructure/fs.py
import os
from pathlib import Path
from typing import Protocol


class IFileSystem(Protocol):
    """Filesystem operations used by the process marker."""

    def read_text(self, path: Path) -> str:
        ...

    def write_text(self, path: Path, content: str, mode: int) -> None:
        """Create or truncate path, leaving it with exactly `mode`."""
        ...

    def ensure_dir(self, path: Path, mode: int) -> None:
        """Create path and any missing ancestors. No-op when it exists."""
        ...

    def remove(self, path: Path) -> None:
        ...


class FileSystem:
    """Concrete FS helper."""

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str, mode: int) -> None:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | os.O_NOFOLLOW, mode)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            # O_CREAT honours the umask and skips existing files
            os.fchmod(f.fileno(), mode)
            f.write(content)

    def ensure_dir(self, path: Path, mode: int) -> None:
        missing: list[Path] = []
        current = path
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent

        for folder in reversed(missing):
            try:
                folder.mkdir(mode=mode)
            except FileExistsError:
                if not folder.is_dir():
                    raise
            else:
                os.chmod(folder, mode)

        if not path.is_dir():
            raise NotADirectoryError(f"Not a directory: {path}")

    def remove(self, path: Path) -> None:
        path.unlink()
