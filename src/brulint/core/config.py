"""Configuration management for brulint (brulint.toml parsing + defaults)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

from brulint.core.errors import ConfigError

CONFIG_FILENAME = "brulint.toml"


@dataclass
class LintConfig:
    ignore: list[str] = field(default_factory=list)
    sample_data_dir: str = "Sample Data"
    descriptor_prefix: str = "uri://ed-fi.org/"


@dataclass
class BruLintConfig:
    """Complete brulint configuration."""

    include_dirs: list[str] = field(
        default_factory=lambda: [
            "SIS",
            "Sample Data",
            "Assessment",
        ]
    )
    exclude: list[str] = field(default_factory=lambda: ["node_modules"])
    lint: LintConfig = field(default_factory=LintConfig)


def load_config(project_path: Path | None = None) -> BruLintConfig:
    """Load configuration from brulint.toml if present, otherwise return defaults."""
    config = BruLintConfig()

    if project_path is None:
        project_path = Path.cwd()

    config_file = project_path / CONFIG_FILENAME
    if not config_file.is_file():
        return config

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid {CONFIG_FILENAME}: {e}") from e

    if "general" in data:
        gen = data["general"]
        if "include_dirs" in gen:
            config.include_dirs = _string_list(gen["include_dirs"], "general.include_dirs")
        if "exclude" in gen:
            config.exclude = _string_list(gen["exclude"], "general.exclude")

    if "lint" in data:
        lt = data["lint"]
        if "ignore" in lt:
            config.lint.ignore = _string_list(lt["ignore"], "lint.ignore")
        for attr in ("sample_data_dir", "descriptor_prefix"):
            if attr in lt:
                if not isinstance(lt[attr], str):
                    raise ConfigError(f"lint.{attr} must be a string")
                setattr(config.lint, attr, lt[attr])

    return config


def _string_list(value: object, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings")
    return list(value)
