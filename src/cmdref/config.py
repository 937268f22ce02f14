"""Configuration management module.

Settings for a documentation run are read from TOML: either a dedicated
``cmdref.toml`` or the ``[tool.cmdref]`` table of ``pyproject.toml`` in the
working directory. Command-line options override file values.
"""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import tomli

from .errors import ConfigError

logger = logging.getLogger(__name__)

FORMATS = ("markdown", "yaml")


@dataclass
class DocsConfig:
    """Documentation run settings."""

    cli: str | None = None  # "module:attribute" of the root Click command
    prog_name: str | None = None  # root name, defaults to the command's name
    output_dir: str = "docs/reference"
    format: str = "markdown"
    yaml_file: str = "cmds.yml"
    index_url: str | None = None  # defaults to /reference/<root name>/
    comment_marker: str = "#"
    disable_autogen_tag: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocsConfig":
        """Create from dictionary.

        Raises:
            ConfigError: If a value is invalid
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key.replace("-", "_") not in known:
                logger.warning(f"Ignoring unknown config key: {key}")

        values = {
            key.replace("-", "_"): value
            for key, value in data.items()
            if key.replace("-", "_") in known
        }
        config = cls(**values)
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigError if any setting is unusable."""
        if self.format not in FORMATS:
            raise ConfigError(
                f"Invalid format: '{self.format}'. Expected one of: {', '.join(FORMATS)}"
            )
        if not self.output_dir:
            raise ConfigError("Output directory cannot be empty")
        if not self.comment_marker:
            raise ConfigError("Comment marker cannot be empty")
        if not isinstance(self.disable_autogen_tag, bool):
            raise ConfigError("disable_autogen_tag must be true or false")


class ConfigManager:
    """Locate and load cmdref configuration."""

    CONFIG_FILE = "cmdref.toml"
    PYPROJECT_FILE = "pyproject.toml"

    @classmethod
    def get_config_path(cls, custom_path: str | None = None, base_dir: Path | None = None) -> Path | None:
        """Return the config file to read, or None when there is none.

        Args:
            custom_path: Explicit config file (must exist)
            base_dir: Directory searched for the default files (defaults to cwd)

        Raises:
            ConfigError: If custom_path does not exist
        """
        if custom_path:
            path = Path(custom_path).expanduser()
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            return path

        base = base_dir or Path.cwd()
        for candidate in (base / cls.CONFIG_FILE, base / cls.PYPROJECT_FILE):
            if candidate.exists():
                return candidate
        return None

    @classmethod
    def load_config(cls, custom_path: str | None = None, base_dir: Path | None = None) -> DocsConfig:
        """Load configuration from file.

        Args:
            custom_path: Custom config file path (optional)
            base_dir: Directory searched for the default files (defaults to cwd)

        Returns:
            DocsConfig object

        Raises:
            ConfigError: If loading fails
        """
        config_path = cls.get_config_path(custom_path, base_dir)

        if config_path is None:
            logger.debug("Config file not found, using defaults")
            return DocsConfig()

        try:
            with open(config_path, "rb") as f:
                data = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        if config_path.name == cls.PYPROJECT_FILE:
            data = data.get("tool", {}).get("cmdref", {})

        logger.debug(f"Loaded config from: {config_path}")
        return DocsConfig.from_dict(data)


__all__ = ["ConfigManager", "DocsConfig", "FORMATS"]
