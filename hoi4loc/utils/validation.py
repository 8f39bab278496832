"""Path validation for command-line inputs."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

LOCALISATION_EXTENSIONS = {".yml", ".yaml"}


class ValidationError(Exception):
    """Raised when validation fails."""
    pass


class PathValidator:
    """Validate file and directory paths."""

    @classmethod
    def validate_directory(cls, path: Union[str, Path]) -> Path:
        """Validate and return an existing directory path.

        Raises:
            ValidationError: If the path is empty, missing or not a directory
        """
        if not str(path):
            raise ValidationError("Path cannot be empty")
        path = Path(path).resolve()
        if not path.exists():
            raise ValidationError(f"Directory does not exist: {path}")
        if not path.is_dir():
            raise ValidationError(f"Path is not a directory: {path}")
        return path

    @classmethod
    def validate_file(
        cls,
        path: Union[str, Path],
        allowed_extensions: Optional[set] = None,
        max_size: Optional[int] = None,
    ) -> Path:
        """Validate and return an existing file path.

        Args:
            path: Path to validate
            allowed_extensions: Set of allowed file extensions (e.g., {'.yml', '.yaml'})
            max_size: Maximum file size in bytes

        Returns:
            Path object for the validated file

        Raises:
            ValidationError: If validation fails
        """
        if not str(path):
            raise ValidationError("File path cannot be empty")
        path = Path(path).resolve()

        if allowed_extensions:
            ext = path.suffix.lower()
            if ext not in allowed_extensions:
                raise ValidationError(
                    f"Invalid file extension '{ext}'. Allowed: {', '.join(sorted(allowed_extensions))}"
                )

        if not path.exists():
            raise ValidationError(f"File does not exist: {path}")
        if not path.is_file():
            raise ValidationError(f"Path is not a file: {path}")

        if max_size is not None:
            try:
                size = path.stat().st_size
            except PermissionError:
                raise ValidationError(f"Permission denied accessing file: {path}")
            if size > max_size:
                raise ValidationError(f"File too large (maximum {max_size} bytes)")

        return path
