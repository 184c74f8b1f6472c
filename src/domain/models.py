from enum import Enum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

OWNER_ONLY_MODE: Final[int] = 0o600
DIRECTORY_MODE: Final[int] = 0o755


class MarkerPolicy(BaseModel):
    """Permission modes applied when the marker touches disk."""

    model_config = ConfigDict(frozen=True)
    create_mode: int = Field(default=OWNER_ONLY_MODE, ge=0, le=0o777)
    rewrite_mode: int = Field(default=OWNER_ONLY_MODE, ge=0, le=0o777)
    dir_mode: int = Field(default=DIRECTORY_MODE, ge=0, le=0o777)


class MarkerState(Enum):
    ABSENT = "absent"
    UNREADABLE = "unreadable"
    MALFORMED = "malformed"
    STALE = "stale"
    LIVE = "live"


class MarkerStatus(BaseModel):
    model_config = ConfigDict(frozen=True)
    path: Path
    state: MarkerState
    pid: int | None = None

    @property
    def blocks_startup(self) -> bool:
        return self.state is MarkerState.LIVE
