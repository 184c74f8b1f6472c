# src/control/dependency_container.py
from pathlib import Path
from dependency_injector import containers, providers

from infrastructure.env import Env
from infrastructure.logging import create_logger
from infrastructure.fs import FileSystem, IFileSystem
from infrastructure.process_table import OsProcessLivenessChecker, ProcessLivenessChecker
from domain.models import MarkerPolicy
from domain.marker_config import MarkerConfig
from application.instance_guard import InstanceGuard

# ------------------------ Factory / Provider functions ------


def env_provider_func(path: str | Path) -> Env:
    return Env().load(path).unwrap()


def marker_config_func(env: Env, default_path: Path) -> MarkerConfig:
    """An explicit PIDMARKER_CONFIG file wins, otherwise PIDMARKER_PATH with default modes."""
    config_file = env.vars.get("config")
    if config_file:
        return MarkerConfig.load(Path(str(config_file)))
    return MarkerConfig(
        path=env.get_path("path", default_path),
        policy=MarkerPolicy(),
    )


def get_log_dir(env: Env, default: Path) -> Path:
    return env.get_path("log_dir", default)


def get_logfile_limit(env: Env, default: int) -> int:
    return env.get_int("logfile_size_limit_mb", default)


# ------------------------ Dependency Container ------------------------


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    # -------------------- Infrastructure --------------------

    env: providers.Singleton[Env] = providers.Singleton(
        env_provider_func,
        path=config.dotenv_path
    )

    fs: providers.Singleton[IFileSystem] = providers.Singleton(FileSystem)

    liveness: providers.Singleton[ProcessLivenessChecker] = providers.Singleton(
        OsProcessLivenessChecker
    )

    logger = providers.Singleton(
        create_logger,
        name="pidmarker",
        log_dir=providers.Callable(get_log_dir, env, config.log_dir),
        logfile_size_limit_mb=providers.Callable(
            get_logfile_limit, env, config.logfile_size_limit_MB
        ),
        console=config.console,
    )

    # -------------------- Domain --------------------
    marker_config: providers.Singleton[MarkerConfig] = providers.Singleton(
        marker_config_func,
        env=env,
        default_path=config.pid_file,
    )

    # -------------------- Application --------------------
    instance_guard: providers.Factory[InstanceGuard] = providers.Factory(
        InstanceGuard,
        path=marker_config.provided.path,
        fs=fs,
        liveness=liveness,
        policy=marker_config.provided.policy,
        logger=logger,
    )
