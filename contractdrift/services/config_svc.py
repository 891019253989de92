#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML and env vars
#  - Caches composed config for performance
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from typing import Any

import yaml

from contractdrift.__version__ import __version__
from contractdrift.components.contract.breaking_risk_comp import MEDIUM_THRESHOLD, SAFE_THRESHOLD
from contractdrift.components.contract.endpoint_registry_comp import RECOGNIZED_METHODS
from contractdrift.components.contract.field_usage_comp import FIELD_USAGE_LIMIT
from contractdrift.helpers.dto.config_dto import DriftSettings, InternalInfoResult

ENV_PREFIX = "CONTRACTDRIFT_"

# Whitelist of user-configurable keys (YAML, env, overrides)
ALLOWED_KEYS = {
    "log_level",
    "api_host",
    "api_port",
    "markup_parser",
    "max_upload_bytes",
}

MARKUP_PARSERS = ("subset", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache and optional direct overrides."""
        self._config: dict[str, Any] | None = None
        self._overrides = overrides or {}
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a single config value or default."""
        return self.get_config().get(key, default)

    def reload(self) -> dict[str, Any]:
        """
        Force reload configuration from all sources.

        Returns:
            Newly composed config
        """
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_settings(self) -> DriftSettings:
        """
        Build DriftSettings from the current configuration.

        This is the boundary where raw config values are validated. Invalid
        values fall back to defaults with a warning.
        """
        cfg = self.get_config()
        defaults = DriftSettings()

        markup_parser = str(cfg.get("markup_parser", defaults.markup_parser)).lower()
        if markup_parser not in MARKUP_PARSERS:
            self._logger.warning(f"[ConfigService] Unknown markup_parser '{markup_parser}', using 'subset'")
            markup_parser = defaults.markup_parser

        log_level = str(cfg.get("log_level", defaults.log_level)).upper()
        if log_level not in LOG_LEVELS:
            self._logger.warning(f"[ConfigService] Unknown log_level '{log_level}', using INFO")
            log_level = defaults.log_level

        return DriftSettings(
            log_level=log_level,
            api_host=str(cfg.get("api_host", defaults.api_host)),
            api_port=self._as_int("api_port", cfg.get("api_port"), defaults.api_port),
            markup_parser=markup_parser,  # type: ignore[arg-type]
            max_upload_bytes=self._as_int("max_upload_bytes", cfg.get("max_upload_bytes"), defaults.max_upload_bytes),
        )

    def get_internal_info(self) -> InternalInfoResult:
        """
        Get internal (read-only) analysis constants.

        Returns:
            InternalInfoResult with internal constant values
        """
        return InternalInfoResult(
            version=__version__,
            recognized_methods=RECOGNIZED_METHODS,
            field_usage_limit=FIELD_USAGE_LIMIT,
            safe_threshold=SAFE_THRESHOLD,
            medium_threshold=MEDIUM_THRESHOLD,
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/contractdrift/config.yaml  (if present)
          3) ./config/config.yaml
          4) $CONFIG_PATH (if set)
          5) overrides dict passed to the constructor
          6) Environment variables (CONTRACTDRIFT_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._merge_allowed(cfg, self._load_yaml("/etc/contractdrift/config.yaml"))
        self._merge_allowed(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = os.getenv("CONFIG_PATH")
        if env_path:
            self._merge_allowed(cfg, self._load_yaml(env_path))

        self._merge_allowed(cfg, self._overrides)
        self._apply_env_overrides(cfg)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """Base defaults for user-configurable settings only."""
        defaults = DriftSettings()
        return {
            "log_level": defaults.log_level,
            "api_host": defaults.api_host,
            "api_port": defaults.api_port,
            "markup_parser": defaults.markup_parser,
            "max_upload_bytes": defaults.max_upload_bytes,
        }

    def _merge_allowed(self, cfg: dict[str, Any], source: dict[str, Any]) -> None:
        for key, value in source.items():
            if key not in ALLOWED_KEYS:
                self._logger.debug(f"Ignoring config for unknown key: {key}")
                continue
            cfg[key] = value

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[ConfigService] Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[ConfigService] Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides for user-configurable keys only.

        Supported formats:
          CONTRACTDRIFT_LOG_LEVEL=DEBUG
          CONTRACTDRIFT_API_HOST=0.0.0.0
          CONTRACTDRIFT_API_PORT=9000
          CONTRACTDRIFT_MARKUP_PARSER=yaml
          CONTRACTDRIFT_MAX_UPLOAD_BYTES=1048576
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX):
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if key not in ALLOWED_KEYS:
                self._logger.debug(f"Ignoring environment override for unknown key: {key}")
                continue

            cfg[key] = int(v) if v.isdigit() else v

    def _as_int(self, key: str, value: Any, default: int) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            self._logger.warning(f"[ConfigService] Invalid {key} '{value}', using {default}")
            return default
