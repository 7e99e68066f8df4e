#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files and env vars
#  - Caches composed config for performance
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from folio.helpers.dto.config_dto import StorageConfig

# Keys an operator may set through config.yaml or FOLIO_* variables
USER_CONFIG_KEYS = frozenset(
    {
        "data_dir",
        "site_file",
        "submissions_file",
        "submissions_max",
        "log_level",
    }
)

ENV_PREFIX = "FOLIO_"


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.

    Args:
        overrides: Values applied after the YAML files and before the
            environment (e.g. from CLI flags)
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
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

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("data_dir")
            './data'
            >>> service.get("mail.host", "localhost")
            'localhost'
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("[ConfigService] Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_storage_config(self) -> StorageConfig:
        """
        Build a StorageConfig from the current configuration.

        Relative file names are resolved against data_dir.

        Raises:
            ValueError: submissions_max is not a positive integer
        """
        cfg = self.get_config()
        data_dir = Path(str(cfg["data_dir"])).expanduser()

        try:
            submissions_max = int(cfg["submissions_max"])
        except (TypeError, ValueError):
            raise ValueError(f"submissions_max must be an integer, got {cfg['submissions_max']!r}") from None
        if submissions_max < 1:
            raise ValueError(f"submissions_max must be positive, got {submissions_max}")

        return StorageConfig(
            data_dir=data_dir,
            site_path=data_dir / str(cfg["site_file"]),
            submissions_path=data_dir / str(cfg["submissions_file"]),
            submissions_max=submissions_max,
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/folio/config.yaml  (if present)
          3) ./config/config.yaml    (if present)
          4) $CONFIG_PATH            (if set)
          5) overrides passed to the constructor
          6) Environment variables (FOLIO_*)
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml("/etc/folio/config.yaml"))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = os.getenv("CONFIG_PATH")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if self._overrides:
            self._deep_merge(cfg, dict(self._overrides))

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        return {
            "data_dir": "./data",
            "site_file": "site.json",
            "submissions_file": "submissions.json",
            "submissions_max": 250,
            "log_level": "INFO",
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
        Load a YAML file; returns {} if not found, unreadable or not a mapping.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[ConfigService] Ignoring unreadable config {path}: {e}")
            return {}
        if not isinstance(loaded, dict):
            if loaded is not None:
                self._logger.warning(f"[ConfigService] Ignoring config {path}: top level is not a mapping")
            return {}
        return loaded

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides for the user-configurable keys only.

        Supported formats:
          FOLIO_DATA_DIR=/srv/folio
          FOLIO_SITE_FILE=site.json
          FOLIO_SUBMISSIONS_FILE=submissions.json
          FOLIO_SUBMISSIONS_MAX=500
          FOLIO_LOG_LEVEL=DEBUG
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX):
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if key not in USER_CONFIG_KEYS:
                self._logger.debug(f"Ignoring environment override for unknown key: {key}")
                continue

            val: Any
            if v.lower() in ("true", "false"):
                val = v.lower() == "true"
            elif v.isdigit():
                val = int(v)
            else:
                val = v
            cfg[key] = val
