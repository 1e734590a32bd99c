#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files and environment
#  - Caches composed config
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from layerpak.components.infrastructure.status_logger_comp import StatusLogger
from layerpak.components.layers.layer_contributor_comp import DEFAULT_DIRECTORY_MODE
from layerpak.helpers.exceptions import ConfigError

ENV_PREFIX = "LAYERPAK_"


class ConfigService:
    """
    Service for loading and caching layerpak configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        self._overrides = overrides or {}
        self._config: dict[str, Any] | None = None
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

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("log_level")
            'INFO'
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/layerpak/config.yaml  (if present)
          3) ./config/layerpak.yaml
          4) $LAYERPAK_CONFIG (if set)
          5) overrides passed to the constructor
          6) Environment variables (LAYERPAK_*, BP_LOG_LEVEL, BP_DEBUG, NO_COLOR)
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml("/etc/layerpak/config.yaml"))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "layerpak.yaml")))

        env_path = os.getenv("LAYERPAK_CONFIG")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if self._overrides:
            self._deep_merge(cfg, self._overrides)

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            # Status output
            "log_level": "INFO",
            "color": True,
            # Layers
            "layers_dir": None,
            "layer_directory_mode": DEFAULT_DIRECTORY_MODE,
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

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
            self._logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}

        # YAML reads `layer_directory_mode: 750` as decimal; keep the digits as written
        mode = data.get("layer_directory_mode")
        if isinstance(mode, int) and not isinstance(mode, bool):
            data["layer_directory_mode"] = str(mode)
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          LAYERPAK_LOG_LEVEL=DEBUG
          LAYERPAK_LAYERS_DIR=/layers
          BP_LOG_LEVEL=DEBUG   (buildpack convention)
          BP_DEBUG=true        (same as BP_LOG_LEVEL=DEBUG)
          NO_COLOR=1           (disables color)
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == "LAYERPAK_CONFIG":
                continue
            key = k[len(ENV_PREFIX) :].lower()
            if not key:
                continue
            # Directory modes are octal strings ("755", "0o750")
            cfg[key] = v if key == "layer_directory_mode" else self._parse_env_value(v)

        bp_log_level = os.getenv("BP_LOG_LEVEL")
        if bp_log_level:
            cfg["log_level"] = bp_log_level.upper()
        if os.getenv("BP_DEBUG", "").lower() in ("true", "1"):
            cfg["log_level"] = "DEBUG"
        if os.getenv("NO_COLOR"):
            cfg["color"] = False

    @staticmethod
    def _parse_env_value(v: str) -> Any:
        """Parse numeric/bool env values."""
        if v.lower() in ("true", "false"):
            return v.lower() == "true"
        if v.isdigit():
            return int(v)
        return v

    # ----------------------------------------------------------------------
    # Host pipeline helpers
    # ----------------------------------------------------------------------

    def make_status_logger(self) -> StatusLogger:
        """
        Build the status logger contributors report through.

        This is the boundary where output settings are extracted from the raw
        config dict. Host pipelines pass the result as ``logger=`` to
        DependencyLayerContributor / HelperLayerContributor.
        """
        return StatusLogger.from_config(self.get_config())

    def directory_mode(self) -> int:
        """
        Permission bits for recreated layer directories.

        Host pipelines pass the result as ``directory_mode=`` to contributors.
        Strings (env vars, YAML files) are octal digits: ``"750"``, ``"0o750"``.
        Ints passed as overrides are used as-is.

        Raises:
            ConfigError: If the value is not a valid permission mode
        """
        mode = self.get("layer_directory_mode", DEFAULT_DIRECTORY_MODE)
        if isinstance(mode, bool) or not isinstance(mode, int | str):
            raise ConfigError("layer_directory_mode", mode, "expected octal digits such as 755")
        if isinstance(mode, str):
            try:
                mode = int(mode, 8)
            except ValueError as e:
                raise ConfigError("layer_directory_mode", mode, "expected octal digits such as 755") from e
        if not 0 <= mode <= 0o7777:
            raise ConfigError("layer_directory_mode", mode, "outside 0o0000-0o7777")
        return mode
