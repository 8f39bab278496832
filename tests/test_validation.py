"""Tests for validation.py - path validation."""
from __future__ import annotations

import pytest


class TestPathValidator:
    """Test path validation functionality."""

    def test_validate_directory_exists(self, tmp_path):
        """Test validating an existing directory."""
        from hoi4loc.utils.validation import PathValidator

        assert PathValidator.validate_directory(tmp_path) == tmp_path.resolve()

    def test_validate_directory_missing(self, tmp_path):
        """Test failing when directory doesn't exist."""
        from hoi4loc.utils.validation import PathValidator, ValidationError

        with pytest.raises(ValidationError):
            PathValidator.validate_directory(tmp_path / "nonexistent")

    def test_validate_directory_is_file(self, tmp_path):
        from hoi4loc.utils.validation import PathValidator, ValidationError

        f = tmp_path / "events_l_english.yml"
        f.write_text("l_english:\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            PathValidator.validate_directory(f)

    def test_validate_empty_path(self):
        from hoi4loc.utils.validation import PathValidator, ValidationError

        with pytest.raises(ValidationError):
            PathValidator.validate_file("")
        with pytest.raises(ValidationError):
            PathValidator.validate_directory("")

    def test_validate_file_exists(self, tmp_path):
        """Test validating an existing file."""
        from hoi4loc.utils.validation import PathValidator

        f = tmp_path / "events_l_english.yml"
        f.write_text("l_english:\n", encoding="utf-8")
        assert PathValidator.validate_file(f) == f.resolve()

    def test_validate_file_missing(self, tmp_path):
        """Test failing when file doesn't exist."""
        from hoi4loc.utils.validation import PathValidator, ValidationError

        with pytest.raises(ValidationError):
            PathValidator.validate_file(tmp_path / "missing.yml")

    def test_validate_file_with_extensions(self, tmp_path):
        """Test validating file with allowed extensions."""
        from hoi4loc.utils.validation import (
            LOCALISATION_EXTENSIONS,
            PathValidator,
            ValidationError,
        )

        yaml_file = tmp_path / "news_l_russian.YML"
        yaml_file.write_text("l_russian:\n", encoding="utf-8")
        assert PathValidator.validate_file(
            yaml_file, allowed_extensions=LOCALISATION_EXTENSIONS
        ) == yaml_file.resolve()

        txt_file = tmp_path / "notes.txt"
        txt_file.write_text("content", encoding="utf-8")
        with pytest.raises(ValidationError):
            PathValidator.validate_file(txt_file, allowed_extensions=LOCALISATION_EXTENSIONS)

    def test_validate_file_is_directory(self, tmp_path):
        from hoi4loc.utils.validation import PathValidator, ValidationError

        d = tmp_path / "localisation.yml"
        d.mkdir()
        with pytest.raises(ValidationError):
            PathValidator.validate_file(d)

    def test_validate_file_size(self, tmp_path):
        """Test validating file size constraints."""
        from hoi4loc.utils.validation import PathValidator, ValidationError

        f = tmp_path / "big.yml"
        f.write_text("x" * 100, encoding="utf-8")
        assert PathValidator.validate_file(f, max_size=200) == f.resolve()
        with pytest.raises(ValidationError):
            PathValidator.validate_file(f, max_size=50)
