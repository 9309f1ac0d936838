"""Unified configuration management for the application."""
from __future__ import annotations
import copy
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from oop_concepts.config.schemas import AppConfig
from oop_concepts.config.utils.env_expansion import expand_config_env_vars
from oop_concepts.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> dotted path inside the configuration mapping
ENV_OVERRIDES = {
    "OOPC_LOG_LEVEL": "logging.level",
    "OOPC_LOG_DESTINATION": "logging.destination",
    "OOPC_LOG_FILE": "logging.file.path",
    "OOPC_OUTPUT_FORMAT": "output.format",
    "OOPC_PERSON_NAME": "defaults.person_name",
    "OOPC_PERSON_AGE": "defaults.person_age",
    "OOPC_COMPANY": "defaults.company",
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is read lazily from a JSON or YAML file (when given),
    environment references inside values are expanded, ``OOPC_*`` environment
    overrides are applied, and the result is validated into ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        if self._config_file:
            config_data = self.load_from_file(self._config_file)
        else:
            config_data = {}

        config_data = expand_config_env_vars(config_data)
        config_data = self.apply_environment_overrides(config_data)

        try:
            config = AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                {"errors": e.errors(include_url=False)},
            ) from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return config

    @staticmethod
    def load_from_file(path: str) -> Dict[str, Any]:
        """
        Read a configuration mapping from a JSON or YAML file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a mapping
        """
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}", {"path": path}
            )

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if file_path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Failed to parse configuration file {path}: {e}", {"path": path}
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file {path}: {e}", {"path": path}
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping", {"path": path}
            )
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``config_data`` with ``OOPC_*`` overrides applied."""
        result = copy.deepcopy(config_data)
        for env_var, dotted_path in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue

            node = result
            *parents, leaf = dotted_path.split(".")
            for key in parents:
                child = node.get(key)
                if not isinstance(child, dict):
                    child = {}
                    node[key] = child
                node = child
            node[leaf] = value
            logger.debug("Applied environment override %s -> %s", env_var, dotted_path)
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``logging.level``."""
        node: Any = self.app_config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Return the shared configuration manager, replacing it if the file changes."""
    global _config_manager
    with _config_manager_lock:
        if _config_manager is None or _config_manager.config_file != config_file:
            _config_manager = ConfigurationManager(config_file)
        return _config_manager
