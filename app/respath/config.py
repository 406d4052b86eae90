"""respath configuration and settings.

This module provides the configuration model and I/O functions for
the command-line front end: which virtual directory to enumerate by
default and where to look for it.

Configuration is stored in ~/.config/respath/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from respath.core.paths import get_config_path

DEFAULT_VIRTUAL_DIRECTORY = "payloads"


class RespathConfig(BaseModel):
    """Configuration for respath.

    Attributes:
        virtual_directory: Name enumerated when none is given on the command line.
        search_path: Directories and archives to search. Empty means sys.path.
        origins: Extra origin addresses always enumerated alongside the search path.
    """

    model_config = ConfigDict(extra="forbid")

    virtual_directory: Annotated[
        str,
        Field(min_length=1, description="Default virtual directory name"),
    ] = DEFAULT_VIRTUAL_DIRECTORY
    search_path: Annotated[
        list[Path],
        Field(description="Search path entries (empty = sys.path)"),
    ] = []
    origins: Annotated[
        list[str],
        Field(description="Extra origin addresses (file:, jar:, zip:)"),
    ] = []

    @field_validator("virtual_directory")
    @classmethod
    def validate_virtual_directory(cls, v: str) -> str:
        """Strip surrounding slashes and reject blank names."""
        name = v.strip().strip("/")
        if not name:
            msg = "virtual_directory cannot be blank"
            raise ValueError(msg)
        return name


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> RespathConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RespathConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return RespathConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> RespathConfig:
    """Load configuration, falling back to defaults when no file exists.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return get_default_config()


def save_config(config: RespathConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The RespathConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: RespathConfig) -> dict[str, object]:
    """Convert RespathConfig to a dictionary for TOML serialization.

    Args:
        config: The RespathConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "virtual_directory": config.virtual_directory,
        "search_path": [str(p) for p in config.search_path],
        "origins": list(config.origins),
    }


def get_default_config() -> RespathConfig:
    """Create a default RespathConfig.

    Returns:
        RespathConfig with default values.
    """
    return RespathConfig()
