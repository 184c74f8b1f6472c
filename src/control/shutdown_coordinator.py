# src/control/shutdown_coordinator.py
import asyncio
import signal
from typing import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ShutdownCoordinator:
    """SIGINT/SIGTERM request a stop, SIGHUP asks the daemon to re-stamp its pid file."""

    stop_event: asyncio.Event = field(default_factory=asyncio.Event)
    on_reload: Callable[[], object] | None = None

    def install_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, self._on_signal)
        if self.on_reload is not None:
            loop.add_signal_handler(signal.SIGHUP, self._on_reload)

    def remove_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM, signal.SIGHUP):
            loop.remove_signal_handler(sig)

    def _on_signal(self) -> None:
        self.stop_event.set()

    def _on_reload(self) -> None:
        if self.on_reload is not None:
            self.on_reload()

    async def wait(self) -> None:
        await self.stop_event.wait()
