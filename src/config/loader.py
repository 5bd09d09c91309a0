"""YAML configuration loader with environment variable overrides.

# ─── CONFIGURATION HIERARCHY ───────────────────────────────────────────
#
# Configuration is loaded in layers (later layers override earlier):
#
#   1. Settings field defaults — e.g. the public CircleCI endpoint
#   2. config/config.yaml      — Static values checked into the repo
#   3. .env file               — Local developer overrides (not committed)
#   4. Environment vars        — Set at deploy time
#
# Only Settings fields that were actually read from .env or the
# environment (``model_fields_set``) override the YAML; a field left at its
# default never hides a YAML value.
#
# The _deep_merge helper does recursive dict merging:
#   base = {"http": {"retries": 0}}
#   overrides = {"http": {"timeout": 30.0}}
#   result = {"http": {"retries": 0, "timeout": 30.0}}
# ──────────────────────────────────────────────────────────────────────
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from src.config.settings import Settings
from src.utils.errors import ConfigurationError

# Settings field -> (config section, key).
_SETTINGS_SECTIONS: dict[str, tuple[str, str]] = {
    "app_env": ("app", "env"),
    "circleci_graphql_url": ("circleci", "graphql_url"),
    "circleci_registry_url": ("circleci", "registry_url"),
    "http_timeout": ("http", "timeout"),
    "http_user_agent": ("http", "user_agent"),
    "cache_max_size": ("cache", "max_size"),
    "log_level": ("logging", "level"),
}


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge it between Settings defaults and overrides.

    Args:
        path: Path to the YAML configuration file.  A missing file is
              treated as an empty config.
        settings: Settings instance to merge; a fresh one is read from the
                  environment when omitted.

    Returns:
        Fully resolved configuration dictionary.

    Raises:
        ConfigurationError: If the file is not valid YAML or its top level
            is not a mapping.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            try:
                yaml_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Cannot parse {config_path}: {exc}") from exc
        if not isinstance(yaml_config, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping at the top level")
    else:
        yaml_config = {}

    settings = settings or Settings()
    defaults = _to_sections(
        {name: Settings.model_fields[name].default for name in _SETTINGS_SECTIONS}
    )
    env_overrides = _to_sections(
        {
            name: getattr(settings, name)
            for name in _SETTINGS_SECTIONS
            if name in settings.model_fields_set
        }
    )

    _deep_merge(defaults, yaml_config)
    _deep_merge(defaults, env_overrides)
    return defaults


def settings_from_config(config: dict) -> Settings:
    """Build the Settings the process runs with from a resolved config.

    Raises:
        ConfigurationError: If a YAML value has the wrong type.
    """
    values = {}
    for name, (section, key) in _SETTINGS_SECTIONS.items():
        section_values = config.get(section)
        if isinstance(section_values, dict) and key in section_values:
            values[name] = section_values[key]
    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration value: {exc}") from exc


def _to_sections(values: dict) -> dict:
    """Nest flat Settings field values into their config sections."""
    sections: dict = {}
    for name, value in values.items():
        section, key = _SETTINGS_SECTIONS[name]
        sections.setdefault(section, {})[key] = value
    return sections


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
