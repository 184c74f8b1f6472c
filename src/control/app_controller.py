# src/control/app_controller.py
import asyncio
import logging
from dataclasses import dataclass
from returns.result import Success, Failure

from application.instance_guard import InstanceGuard
from domain.process_marker import ProcessMarker

from .shutdown_coordinator import ShutdownCoordinator

EXIT_OK = 0
EXIT_ALREADY_RUNNING = 1


@dataclass(frozen=True)
class AppController:
    guard: InstanceGuard
    logger: logging.Logger
    heartbeat_seconds: float = 60.0

    def run(self) -> int:
        match self.guard.claim():
            case Success(marker):
                pass
            case Failure(_):
                # Never serve without owning the marker
                return EXIT_ALREADY_RUNNING

        try:
            asyncio.run(self._serve(marker))
        finally:
            # A failed removal is logged by the guard and must not block exit
            self.guard.release(marker)

        self.logger.info("Daemon shutdown complete")
        return EXIT_OK

    async def _serve(self, marker: ProcessMarker) -> None:
        shutdown = ShutdownCoordinator(on_reload=lambda: self.guard.refresh(marker))
        shutdown.install_signal_handlers()
        self.logger.info("Daemon running as pid %s", marker.read_pid())

        try:
            while not shutdown.stop_event.is_set():
                try:
                    await asyncio.wait_for(shutdown.wait(), timeout=self.heartbeat_seconds)
                except asyncio.TimeoutError:
                    self.logger.debug("Heartbeat, pid file %s", marker.path)
        finally:
            shutdown.remove_signal_handlers()
