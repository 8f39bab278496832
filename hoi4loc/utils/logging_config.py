"""Logging setup for hoi4loc, backed by loguru with optional file rotation."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

# Library code stays silent until the application opts in via setup_logging().
logger.disable("hoi4loc")


class LogManager:
    """Manage package logging with a stderr sink and optional rotating files."""

    _instance: Optional["LogManager"] = None
    _initialized: bool = False

    def __new__(cls) -> "LogManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self._log_dir: Optional[Path] = None

    def setup(
        self,
        log_dir: Optional[Union[str, Path]] = None,
        level: str = "WARNING",
        rotation: str = "10 MB",
        retention: str = "7 days",
        format_string: Optional[str] = None,
    ):
        """Setup logging.

        Args:
            log_dir: Directory for app.log / error.log; stderr only when None
            level: One of LOG_LEVELS
            rotation: Size or time for log rotation (e.g., "10 MB", "midnight")
            retention: How long to keep old logs (e.g., "7 days")
            format_string: Custom format string for log messages
        """
        level = level.upper()
        if format_string is None:
            format_string = (
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{message}</cyan>"
            )

        # Remove default handler
        logger.remove()
        logger.add(sys.stderr, level=level, format=format_string)

        self._log_dir = None
        if log_dir is not None:
            self._log_dir = Path(log_dir)
            self._log_dir.mkdir(parents=True, exist_ok=True)
            logger.add(
                str(self._log_dir / "app.log"),
                level=level,
                rotation=rotation,
                retention=retention,
                format=format_string,
                encoding="utf-8",
            )
            logger.add(
                str(self._log_dir / "error.log"),
                level="ERROR",
                rotation=rotation,
                retention=retention,
                format=format_string,
                encoding="utf-8",
            )

        logger.enable("hoi4loc")
        self.debug(f"Logging initialized at {level}")

    def reset(self):
        """Remove all sinks and silence the package again."""
        logger.remove()
        logger.disable("hoi4loc")

    def debug(self, message: str, **kwargs):
        logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        logger.error(message, **kwargs)

    @property
    def log_dir(self) -> Optional[Path]:
        """Get the log directory path."""
        return self._log_dir

    def get_log_files(self) -> dict:
        """Map log file names to their paths and sizes."""
        if self._log_dir is None or not self._log_dir.exists():
            return {}
        return {
            f.name: {"path": str(f), "size": f.stat().st_size}
            for f in self._log_dir.glob("*.log")
        }

    def read_log(self, filename: str, max_lines: int = 1000) -> str:
        """Read the tail of a log file."""
        if self._log_dir is None:
            return ""
        log_path = self._log_dir / filename
        if not log_path.exists():
            return ""
        with open(log_path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
        return "".join(lines[-max_lines:])


# Global log manager instance
log_manager = LogManager()


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    level: str = "WARNING",
    rotation: str = "10 MB",
    retention: str = "7 days",
):
    """Setup package logging with sensible defaults."""
    log_manager.setup(log_dir=log_dir, level=level, rotation=rotation, retention=retention)
    return log_manager
