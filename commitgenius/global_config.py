"""Global configuration management for commitgenius.

Handles user-level configuration stored in ~/.commitgenius/config.yaml:
- model: Ollama model, temperature, host and request timeout
- format: Conventional commit default and subject length budget
- language: Default language for prompts and messages
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from commitgenius.config import (
    DEFAULT_HOST,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_SUBJECT_LENGTH,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    DEFAULT_USE_CONVENTIONAL,
    normalize_host,
)
from commitgenius.locales import SUPPORTED_LANGUAGES


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


class ModelSettings(BaseModel):
    """Settings for the local inference service."""

    default_model: str = DEFAULT_MODEL
    temperature: float = Field(DEFAULT_TEMPERATURE, ge=0.0, le=1.0)
    host: str = DEFAULT_HOST
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    @field_validator("default_model")
    @classmethod
    def model_must_not_be_empty(cls, v: str) -> str:
        """Ensure the model name is not empty."""
        if not v or not v.strip():
            raise ValueError("default_model cannot be empty")
        return v.strip()

    @field_validator("host")
    @classmethod
    def host_must_be_url(cls, v: str) -> str:
        """Normalize the host into a base URL."""
        if not v or not v.strip():
            raise ValueError("host cannot be empty")
        return normalize_host(v)


class FormatSettings(BaseModel):
    """Settings for commit message formatting."""

    use_conventional_commits: bool = DEFAULT_USE_CONVENTIONAL
    max_subject_length: int = Field(DEFAULT_MAX_SUBJECT_LENGTH, ge=10, le=72)


class LanguageSettings(BaseModel):
    """Settings for prompt and message language."""

    default_language: str = DEFAULT_LANGUAGE

    @field_validator("default_language")
    @classmethod
    def language_must_be_supported(cls, v: str) -> str:
        """Ensure the language has prompt and message tables."""
        v = v.strip().lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language '{v}'. Valid: {', '.join(SUPPORTED_LANGUAGES)}")
        return v


class GlobalConfig(BaseModel):
    """Validated contents of ~/.commitgenius/config.yaml."""

    model: ModelSettings = Field(default_factory=ModelSettings)
    format: FormatSettings = Field(default_factory=FormatSettings)
    language: LanguageSettings = Field(default_factory=LanguageSettings)

    @field_validator("model", "format", "language", mode="before")
    @classmethod
    def ensure_section(cls, v):
        """Treat an empty YAML section as defaults."""
        if v is None:
            return {}
        return v


_CONFIG_DIR = Path.home() / ".commitgenius"


def get_global_config_dir() -> Path:
    """Get the global commitgenius configuration directory.

    Returns:
        Path to ~/.commitgenius/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.commitgenius/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commitgenius/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def _read_config_file() -> dict[str, Any]:
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(data, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return data


def _validate(data: dict[str, Any]) -> GlobalConfig:
    try:
        return GlobalConfig(**data)
    except (ValidationError, TypeError) as e:
        raise GlobalConfigError(f"Invalid configuration:\n{e}")


def load_global_config() -> GlobalConfig:
    """Load global configuration from ~/.commitgenius/config.yaml.

    Returns:
        Validated configuration. Defaults if the file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is invalid.
    """
    return _validate(_read_config_file())


def save_global_config(config: GlobalConfig) -> None:
    """Save global configuration to ~/.commitgenius/config.yaml.

    Args:
        config: Configuration to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def reset_global_config() -> GlobalConfig:
    """Overwrite the config file with default values.

    Returns:
        The default configuration that was saved.
    """
    config = GlobalConfig()
    save_global_config(config)
    return config


def parse_config_value(raw: str) -> Any:
    """Convert a raw CLI string to a typed config value.

    "true"/"false" become booleans and numeric strings become int or float;
    anything else is kept as a string.

    Args:
        raw: Value as typed on the command line.

    Returns:
        The typed value.
    """
    lowered = raw.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


def _split_key(key: str) -> tuple[str, Optional[str]]:
    parts = key.strip().split(".")
    if len(parts) == 1:
        return parts[0], None
    if len(parts) == 2:
        return parts[0], parts[1]
    raise GlobalConfigError(f"Invalid configuration key: {key}")


def get_config_value(key: str) -> Any:
    """Get a configuration value by dotted key (e.g. "model.default_model").

    Args:
        key: Dotted key, or a bare section name.

    Returns:
        The value (a dict for a section), or None if the key is unknown.
    """
    section_name, field_name = _split_key(key)
    data = load_global_config().model_dump()

    section = data.get(section_name)
    if section is None or field_name is None:
        return section
    return section.get(field_name)


def set_config_value(key: str, raw_value: str) -> Any:
    """Set a configuration value by dotted key and save the file.

    Args:
        key: Dotted key "section.field".
        raw_value: Value as typed on the command line.

    Returns:
        The stored (validated) value.

    Raises:
        GlobalConfigError: If the key is unknown or the value is invalid.
    """
    section_name, field_name = _split_key(key)
    if field_name is None:
        raise GlobalConfigError(f"Expected 'section.key', got: {key}")

    data = load_global_config().model_dump()
    if section_name not in data or field_name not in data[section_name]:
        raise GlobalConfigError(f"Unknown configuration key: {key}")

    current = data[section_name][field_name]
    # String settings keep the raw text, e.g. a model named "7"
    if isinstance(current, str):
        data[section_name][field_name] = raw_value
    else:
        data[section_name][field_name] = parse_config_value(raw_value)
    config = _validate(data)
    save_global_config(config)

    return getattr(getattr(config, section_name), field_name)


def is_configured() -> bool:
    """Check if commitgenius has a config file.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
