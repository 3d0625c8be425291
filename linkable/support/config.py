"""
Config Manager - Laravel-style configuration access
Access config files using dot notation
"""

import importlib
import threading
from typing import Any, Optional, Dict


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        action = Config.get('linkable.default_action')

        # With default
        root = Config.get('app.url', None)

        # Set runtime value
        Config.set('linkable.use_absolute_url', True)

    Config files are plain modules in a config/ package on sys.path:
        config/
        ├── app.py        # URL, APP_ENV, APP_DEBUG
        └── linkable.py   # DEFAULT_ACTION, USE_ABSOLUTE_URL, HOTLINK_TAG
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'app.url', 'linkable.default_action')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            Config.get('linkable.DEFAULT_ACTION', 'view')
            Config.get('Linkable.default_action', 'view')  # Same result
        """
        key_lower = key.lower()

        # Runtime overrides win over config files
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]
        path = parts[1:]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)

        if value is None:
            return default

        for part in path:
            if isinstance(value, dict):
                candidates = value.keys()
                getter = value.__getitem__
            elif hasattr(value, '__dict__'):
                candidates = dir(value)
                getter = lambda name, obj=value: getattr(obj, name)
            else:
                return default

            # Case-insensitive lookup
            match = next((name for name in candidates if str(name).lower() == part), None)
            if match is None:
                return default
            value = getter(match)

        return value

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config file from config/ directory

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'config.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Args:
            key: Config key in dot notation (case-insensitive)
            value: Value to set

        Example:
            Config.set('app.url', 'https://example.com')
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """
        Check if configuration key exists

        Args:
            key: Config key in dot notation

        Returns:
            bool: True if exists
        """
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """
        Get all configuration from a file

        Args:
            file_name: Config file name

        Returns:
            Config module or None
        """
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        return cls._loaded.get(file_name)

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        if file_name:
            with cls._lock:
                cls._loaded.pop(file_name, None)
            cls._load_config_file(file_name)
        else:
            with cls._lock:
                loaded_files = list(cls._loaded.keys())
                cls._loaded.clear()
            for file in loaded_files:
                cls._load_config_file(file)

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
