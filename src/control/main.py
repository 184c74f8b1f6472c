# src/control/main.py
import sys
from typing import Any
from pathlib import Path
from returns.result import Success, Failure, safe

from domain.models import MarkerStatus
from domain.process_marker import inspect_marker
from .app_controller import AppController
from .dependency_container import Container


def default_config() -> dict[str, Any]:
    return {
        "dotenv_path": Path(".env"),
        "pid_file": Path.home() / ".pidmarker" / "daemon.pid",
        "log_dir": Path("logs"),
        "logfile_size_limit_MB": 10,
        "console": True,
    }


def main() -> None:
    exit_code = run_app(default_config()).alt(
        lambda err: print(f"Application failed: {err}", file=sys.stderr)
    ).value_or(1)
    sys.exit(exit_code)


def status() -> None:
    """Report the pid file state for external tooling. Exit 0 only when an instance is live."""
    match read_status(default_config()):
        case Success(marker_status):
            pid = "" if marker_status.pid is None else f" pid={marker_status.pid}"
            print(f"{marker_status.path}: {marker_status.state.value}{pid}")
            sys.exit(0 if marker_status.blocks_startup else 3)
        case Failure(err):
            print(f"Status check failed: {err}", file=sys.stderr)
            sys.exit(1)


def build_container(config: dict[str, Any]) -> Container:
    container = Container()
    container.config.from_dict(config)
    return container


@safe
def run_app(config: dict[str, Any]) -> int:
    container = build_container(config)

    controller = AppController(
        guard=container.instance_guard(),
        logger=container.logger(),
    )
    return controller.run()


@safe
def read_status(config: dict[str, Any]) -> MarkerStatus:
    # No logger: a status check must not create log files
    container = build_container(config)
    return inspect_marker(
        container.marker_config().path, container.fs(), container.liveness()
    )


if __name__ == "__main__":
    main()
