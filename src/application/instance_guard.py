# src/application/instance_guard.py
import logging
from pathlib import Path
from dataclasses import dataclass
from returns.result import Result, Success, Failure, safe

from domain.models import MarkerPolicy, MarkerStatus
from domain.process_marker import (
    ProcessMarker,
    ProcessMarkerError,
    inspect_marker,
)
from infrastructure.fs import IFileSystem
from infrastructure.process_table import ProcessLivenessChecker


@dataclass(frozen=True)
class InstanceGuard:
    """
    Startup/shutdown seam between a daemon and its pid marker.

    Every operation returns a Result instead of raising, so the caller
    decides whether a failure is fatal: a failed claim must stop startup,
    a failed release should only be reported.
    """

    path: Path
    fs: IFileSystem
    liveness: ProcessLivenessChecker
    policy: MarkerPolicy
    logger: logging.Logger

    def claim(self) -> Result[ProcessMarker, ProcessMarkerError]:
        result = self._create()
        match result:
            case Success(marker):
                self.logger.info("Claimed pid file %s", marker.path)
            case Failure(err):
                self.logger.error("Could not claim pid file %s: %s", self.path, err)
        return result

    def refresh(self, marker: ProcessMarker) -> Result[None, ProcessMarkerError]:
        result = safe((ProcessMarkerError,))(marker.rewrite)()
        result.alt(
            lambda err: self.logger.error("Could not rewrite pid file %s: %s", marker.path, err)
        )
        return result

    def release(self, marker: ProcessMarker) -> Result[None, ProcessMarkerError]:
        result = safe((ProcessMarkerError,))(marker.remove)()
        match result:
            case Success(_):
                self.logger.info("Removed pid file %s", marker.path)
            case Failure(err):
                self.logger.warning("Could not remove pid file %s: %s", marker.path, err)
        return result

    def status(self) -> MarkerStatus:
        return inspect_marker(self.path, self.fs, self.liveness)

    @safe((ProcessMarkerError,))
    def _create(self) -> ProcessMarker:
        return ProcessMarker.create(self.path, self.fs, self.liveness, self.policy)
