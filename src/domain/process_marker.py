# src/domain/process_marker.py
import os
import re
from pathlib import Path
from dataclasses import dataclass, field

from domain.models import MarkerPolicy, MarkerState, MarkerStatus
from infrastructure.fs import IFileSystem
from infrastructure.process_table import ProcessLivenessChecker

_PID_PATTERN = re.compile(r"[+-]?[0-9]+")


class ProcessMarkerError(RuntimeError):
    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class MarkerConflictError(ProcessMarkerError):
    pass


class MarkerIOError(ProcessMarkerError):
    pass


def parse_pid(raw: str) -> int | None:
    text = raw.strip()
    if not _PID_PATTERN.fullmatch(text):
        return None
    return int(text, 10)


def inspect_marker(
    path: Path,
    fs: IFileSystem,
    liveness: ProcessLivenessChecker,
) -> MarkerStatus:
    """
    Classify whatever is currently at path without writing anything.
    Only a LIVE result means another instance holds the marker.
    """
    try:
        raw = fs.read_text(path)
    except FileNotFoundError:
        return MarkerStatus(path=path, state=MarkerState.ABSENT)
    except (OSError, UnicodeDecodeError):
        return MarkerStatus(path=path, state=MarkerState.UNREADABLE)

    pid = parse_pid(raw)
    if pid is None:
        return MarkerStatus(path=path, state=MarkerState.MALFORMED)

    state = MarkerState.LIVE if liveness.is_alive(pid) else MarkerState.STALE
    return MarkerStatus(path=path, state=state, pid=pid)


@dataclass(frozen=True)
class ProcessMarker:
    path: Path
    fs: IFileSystem
    liveness: ProcessLivenessChecker
    policy: MarkerPolicy = field(default_factory=MarkerPolicy)

    @classmethod
    def create(
        cls,
        path: str | Path,
        fs: IFileSystem,
        liveness: ProcessLivenessChecker,
        policy: MarkerPolicy | None = None,
    ) -> "ProcessMarker":
        """
        Claim path for the current process.

        Unreadable or malformed content counts as no conflict, so a
        corrupted marker never blocks a restart. Raises MarkerConflictError
        when the recorded process is alive, MarkerIOError when the directory
        or the file cannot be written.
        """
        path = Path(path)
        policy = policy or MarkerPolicy()

        status = inspect_marker(path, fs, liveness)
        if status.blocks_startup:
            raise MarkerConflictError(
                f"pid file found, ensure process {status.pid} is not running or delete {path}",
                path,
            )

        try:
            fs.ensure_dir(path.parent, policy.dir_mode)
        except OSError as e:
            raise MarkerIOError(f"Cannot create directory for pid file {path}: {e}", path) from e

        marker = cls(path=path, fs=fs, liveness=liveness, policy=policy)
        marker._write(str(os.getpid()), policy.create_mode)
        return marker

    def rewrite(self) -> None:
        """Re-stamp the current PID, newline-terminated. No liveness check."""
        self._write(f"{os.getpid()}\n", self.policy.rewrite_mode)

    def remove(self) -> None:
        try:
            self.fs.remove(self.path)
        except OSError as e:
            raise MarkerIOError(f"Cannot remove pid file {self.path}: {e}", self.path) from e

    def read_pid(self) -> int | None:
        try:
            return parse_pid(self.fs.read_text(self.path))
        except (OSError, UnicodeDecodeError):
            return None

    def _write(self, content: str, mode: int) -> None:
        try:
            self.fs.write_text(self.path, content, mode)
        except OSError as e:
            raise MarkerIOError(f"Cannot write pid file {self.path}: {e}", self.path) from e
