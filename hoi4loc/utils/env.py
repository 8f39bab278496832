"""Environment variable and .env file support for CLI defaults."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values


class EnvLoader:
    """Load environment variables from .env files with priority support."""

    _instance: Optional["EnvLoader"] = None
    _loaded: bool = False

    def __new__(cls) -> "EnvLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._loaded:
            return
        self._loaded = True
        self._env_vars: Dict[str, str] = {}
        self._env_file_path: Optional[Path] = None
        self._load_env_file()

    def _load_env_file(self):
        """Load .env files; later locations override earlier ones."""
        possible_paths = [
            Path(".env"),
            Path(".env.local"),
            Path.home() / ".hoi4loc" / ".env",
        ]
        for env_path in possible_paths:
            if env_path.exists():
                self.load_file(env_path)

    def load_file(self, path: Path):
        values = dotenv_values(path)
        for key, value in values.items():
            if value is not None:
                self._env_vars[key] = value
        self._env_file_path = Path(path)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a variable: the process environment wins over .env files."""
        if key in os.environ:
            return os.environ[key]
        return self._env_vars.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get environment variable as boolean."""
        value = self.get(key)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")

    @property
    def env_file_path(self) -> Optional[Path]:
        """Get the path to the last loaded .env file."""
        return self._env_file_path


# Global instance
env = EnvLoader()


LOG_LEVEL_VAR = "HOI4LOC_LOG_LEVEL"
LOG_DIR_VAR = "HOI4LOC_LOG_DIR"
LENIENT_VAR = "HOI4LOC_LENIENT"


def get_log_level() -> str:
    return (env.get(LOG_LEVEL_VAR) or "WARNING").upper()


def get_log_dir() -> Optional[str]:
    return env.get(LOG_DIR_VAR) or None


def get_lenient_default() -> bool:
    return env.get_bool(LENIENT_VAR, False)
