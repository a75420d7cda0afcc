import copy
import os
import yaml
from typing import Dict, Any, Optional
import logging

from ..model.semantic_class import SemanticClass

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "logging": {
        "level": "INFO"
    },
    "catalog": {
        "semantic_classes": {
            "proposition": SemanticClass.PROPOSITION.value,
            "act": SemanticClass.ACT.value,
            "control_action": SemanticClass.CONTROL_ACTION.value
        }
    },
    "signatures": {
        "strict_priority": True
    }
}

class Config:
    """Configuration manager for case frames and the standard catalog."""

    _instance = None

    @classmethod
    def get_instance(cls) -> 'Config':
        """Get the shared instance of Config."""
        if cls._instance is None:
            cls._instance = Config()
        return cls._instance

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        """Initialize with default configuration, updated with `values` if given."""
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)
        self._config_file = None
        if values:
            self._update_dict_recursive(self._config_dict, values)

    def load_from_file(self, config_file: str) -> None:
        """Load configuration from a YAML file."""
        if not os.path.exists(config_file):
            logger.warning(f"Config file {config_file} not found. Using default configuration.")
            return

        with open(config_file, 'r') as f:
            loaded = yaml.safe_load(f)

        if not loaded:
            logger.warning("Empty config file. Using default configuration.")
            return
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping, got {type(loaded).__name__}")

        # Update configuration, maintaining defaults for missing values
        self._update_dict_recursive(self._config_dict, loaded)
        self._config_file = config_file
        logger.info(f"Loaded configuration from {config_file}")

    def _update_dict_recursive(self, target: Dict, source: Dict) -> None:
        """Recursively update a dictionary, preserving keys not in source."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict_recursive(target[key], value)
            else:
                target[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation path."""
        parts = path.split('.')
        current = self._config_dict

        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default

        return current

    def set(self, path: str, value: Any) -> None:
        """Set configuration value by dot-notation path."""
        parts = path.split('.')
        current = self._config_dict

        # Navigate to the parent of the target
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value

    def get_log_level(self) -> str:
        """Get the configured log level name."""
        return str(self.get('logging.level', 'INFO')).upper()

    def get_semantic_classes(self) -> Dict[str, str]:
        """Get the semantic class names used by the standard catalog."""
        defaults = DEFAULT_CONFIG['catalog']['semantic_classes']
        configured = self.get('catalog.semantic_classes', {}) or {}
        return {key: configured.get(key, value) for key, value in defaults.items()}

    def is_strict_priority(self) -> bool:
        """Whether out-of-range signature priorities are rejected instead of clamped."""
        return bool(self.get('signatures.strict_priority', True))

    def save(self, config_file: Optional[str] = None) -> None:
        """Save current configuration to a YAML file."""
        file_path = config_file or self._config_file

        if not file_path:
            logger.warning("No config file specified for saving.")
            return

        with open(file_path, 'w') as f:
            yaml.dump(self._config_dict, f, default_flow_style=False)
        logger.info(f"Saved configuration to {file_path}")

# Shared instance
config = Config.get_instance()
