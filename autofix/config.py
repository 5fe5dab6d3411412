"""
Configuration — loads settings from .autofix.yaml, environment variables,
and built-in defaults (in that priority order: env > YAML > defaults).
"""

import logging
import os

import yaml

logger = logging.getLogger(__name__)


_DEFAULTS = {
    "max_passes": 10,
    "metrics": False,
    "metrics_dir": ".autofix/metrics",
    "log_dir": ".autofix/logs",
    "log_level": "INFO",
}

# Config file search locations
_CONFIG_FILENAMES = [".autofix.yaml", ".autofix.yml"]


def _find_config_file(explicit_path: str | None = None) -> str | None:
    """Find the config file. Checks explicit path, CWD, then user home."""
    if explicit_path:
        if os.path.isfile(explicit_path):
            return explicit_path
        return None

    search_dirs = [os.getcwd(), os.path.expanduser("~")]
    for d in search_dirs:
        for name in _CONFIG_FILENAMES:
            path = os.path.join(d, name)
            if os.path.isfile(path):
                return path
    return None


def _load_yaml(path: str) -> dict:
    """Load YAML file, returns empty dict on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("[Config] Ignoring unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


class Config:
    """Fixer configuration.

    Settings are resolved in priority order:
    1. Environment variables
    2. .autofix.yaml config file
    3. Built-in defaults
    """

    def __init__(self, yaml_data: dict | None = None):
        yd = yaml_data or {}

        # Helper: env var > yaml > default
        def _get(env_key: str, yaml_key: str, cast=str):
            default = _DEFAULTS[yaml_key]
            env_val = os.getenv(env_key)
            if env_val is not None:
                try:
                    return cast(env_val)
                except ValueError:
                    logger.warning("[Config] Bad value %s=%r, using default",
                                   env_key, env_val)
                    return default
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                try:
                    return cast(yaml_val)
                except (TypeError, ValueError):
                    logger.warning("[Config] Bad value for %r: %r, using default",
                                   yaml_key, yaml_val)
            return default

        def _get_bool(env_key: str, yaml_key: str) -> bool:
            env_val = os.getenv(env_key)
            if env_val is not None:
                return env_val.lower() in ("1", "true", "yes")
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                return bool(yaml_val)
            return _DEFAULTS[yaml_key]

        self.FIX_MAX_PASSES = _get("AUTOFIX_MAX_PASSES", "max_passes", cast=int)
        if self.FIX_MAX_PASSES < 1:
            logger.warning("[Config] max_passes must be >= 1, got %d",
                           self.FIX_MAX_PASSES)
            self.FIX_MAX_PASSES = _DEFAULTS["max_passes"]

        # Metrics log
        self.FIX_METRICS = _get_bool("AUTOFIX_METRICS", "metrics")
        self.METRICS_DIR = _get("AUTOFIX_METRICS_DIR", "metrics_dir")

        # File logging
        self.LOG_DIR = _get("AUTOFIX_LOG_DIR", "log_dir")
        self.LOG_LEVEL = _get("AUTOFIX_LOG_LEVEL", "log_level").upper()

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load config from YAML file (if found) + env vars + defaults."""
        path = _find_config_file(config_path)
        yaml_data = _load_yaml(path) if path else {}
        return cls(yaml_data)
