"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from brulint.core.config import BruLintConfig, load_config
from brulint.core.errors import ConfigError


class TestLoadConfig:
    def test_defaults_when_no_config_file(self, tmp_path: Path):
        """Without a brulint.toml, load_config should return defaults."""
        config = load_config(tmp_path)

        assert isinstance(config, BruLintConfig)
        assert config.include_dirs == ["SIS", "Sample Data", "Assessment"]
        assert config.exclude == ["node_modules"]
        assert config.lint.ignore == []
        assert config.lint.sample_data_dir == "Sample Data"
        assert config.lint.descriptor_prefix == "uri://ed-fi.org/"

    def test_loads_general_section(self, tmp_path: Path):
        toml_content = """\
[general]
include_dirs = ["Collections"]
exclude = ["node_modules", "archive"]
"""
        (tmp_path / "brulint.toml").write_text(toml_content)
        config = load_config(tmp_path)

        assert config.include_dirs == ["Collections"]
        assert "archive" in config.exclude

    def test_loads_lint_section(self, tmp_path: Path):
        toml_content = """\
[lint]
ignore = ["Q001", "A001"]
sample_data_dir = "Playground"
descriptor_prefix = "uri://example.org/"
"""
        (tmp_path / "brulint.toml").write_text(toml_content)
        config = load_config(tmp_path)

        assert config.lint.ignore == ["Q001", "A001"]
        assert config.lint.sample_data_dir == "Playground"
        assert config.lint.descriptor_prefix == "uri://example.org/"
        # Untouched sections keep their defaults.
        assert config.include_dirs == ["SIS", "Sample Data", "Assessment"]

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / "brulint.toml").write_text("[lint\nignore = ")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_wrong_types_raise(self, tmp_path: Path):
        (tmp_path / "brulint.toml").write_text('[lint]\nignore = "Q001"\n')
        with pytest.raises(ConfigError, match="lint.ignore"):
            load_config(tmp_path)

    def test_wrong_scalar_type_raises(self, tmp_path: Path):
        (tmp_path / "brulint.toml").write_text("[lint]\nsample_data_dir = 3\n")
        with pytest.raises(ConfigError, match="sample_data_dir"):
            load_config(tmp_path)
