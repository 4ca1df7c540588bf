import copy
import logging

import yaml

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager that loads from YAML and merges with defaults."""

    DEFAULTS = {
        "server": {
            "host": "127.0.0.1",
            "port": 5000,
            "debug": False,
        },
        "log_bridge": {
            "default_level": "info",
            "response_level": "info",
            "error_level": "error",
            "log_payload": False,
            "log_query": True,
            "log_errors": True,
            "ignore_paths": [],
        },
    }

    def __init__(self, config_path=None):
        self._config = copy.deepcopy(self.DEFAULTS)

        if config_path is not None:
            try:
                with open(config_path, "r") as f:
                    user_config = yaml.safe_load(f)

                if user_config and isinstance(user_config, dict):
                    self._config = self._deep_merge(self._config, user_config)
            except FileNotFoundError:
                logger.debug("Config file %s not found, using defaults", config_path)
            except yaml.YAMLError:
                logger.warning("Invalid YAML in %s, using defaults", config_path)

    @staticmethod
    def _deep_merge(base, override):
        """Recursively merge override dict into base dict."""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = Config._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result

    def bridge_options(self, **overrides):
        """Return the log_bridge section with ``overrides`` merged on top."""
        return self._deep_merge(self._config["log_bridge"], overrides)

    def __getitem__(self, key):
        return self._config[key]
