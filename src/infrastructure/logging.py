import sys
import logging
from dataclasses import dataclass
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(process)d | %(message)s"


@dataclass(eq=False)
class TruncatingFileHandler(logging.FileHandler):
    """Starts the file over once it grows past max_bytes."""

    filename: Path
    max_bytes: int
    mode: str = "a"
    encoding: str | None = "utf-8"
    delay: bool = False

    def __post_init__(self) -> None:
        self.filename.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(
            filename=self.filename,
            mode=self.mode,
            encoding=self.encoding,
            delay=self.delay,
        )

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if self.max_bytes > 0 and self.stream and self.stream.tell() >= self.max_bytes:
                self.stream.seek(0)
                self.stream.truncate()
            super().emit(record)
        except Exception:
            self.handleError(record)


def create_logger(
    *,
    name: str,
    log_dir: Path,
    logfile_size_limit_mb: int,
    level: int = logging.INFO,
    console: bool = False,
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if logger.handlers:
        return logger  # singleton safety

    formatter = logging.Formatter(LOG_FORMAT)

    handler = TruncatingFileHandler(
        filename=log_dir / f"{name}.log",
        max_bytes=logfile_size_limit_mb * 1024 * 1024,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    return logger
