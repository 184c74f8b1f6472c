# src/infrastructure/process_table.py
import os
from typing import Protocol


class ProcessLivenessChecker(Protocol):
    def is_alive(self, pid: int) -> bool:
        ...


class OsProcessLivenessChecker:
    """Answers liveness by sending signal 0 to the process."""

    def is_alive(self, pid: int) -> bool:
        # 0 and negative values address process groups, not a single process
        if pid <= 0:
            return False
        try:
            os.kill(pid, 0)
        except (ProcessLookupError, OverflowError):
            return False
        except PermissionError:
            # Exists, but owned by another user
            return True
        return True
