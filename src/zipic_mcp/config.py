import os
import pathlib
import sys
import yaml
from typing import Any, Dict, Optional, Tuple

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "scheme": "zipic", # URL scheme the application registers for deep links.
    "bundle_id": "studio.5km.zipic", # Bundle identifier used for the availability check.
    "install_url": "https://zipic.app", # Shown when the application is missing.
    "open_command": "open", # Host command that hands a URI to its registered handler.
    "verbose": False,
    "log_file": None, # None means no file logging.
}

# Configuration file paths
USER_CONFIG_DIR = pathlib.Path("~/.config/zipic_mcp").expanduser()
USER_CONFIG_PATH = USER_CONFIG_DIR / "config.yaml"
LOCAL_CONFIG_PATH = pathlib.Path(".zipicmcp.yaml")

# Source descriptions
SOURCE_DEFAULT = "application default"
SOURCE_USER_CONFIG = f"user global config file ({USER_CONFIG_PATH})"
SOURCE_LOCAL_CONFIG = f"local project config file ({LOCAL_CONFIG_PATH})"
SOURCE_ENV_VAR = "environment variable"
SOURCE_CLI = "command-line argument"

ENV_VAR_PREFIX = "ZIPIC_MCP_"


class Config:
    def __init__(self):
        self._config: Dict[str, Any] = {}
        self._sources: Dict[str, str] = {}

        self._load_defaults()
        self._load_file(USER_CONFIG_PATH, SOURCE_USER_CONFIG)
        self._load_file(LOCAL_CONFIG_PATH, SOURCE_LOCAL_CONFIG)
        self._load_env_vars()

    def _load_defaults(self):
        for key, value in DEFAULT_CONFIG.items():
            self._config[key] = value
            self._sources[key] = SOURCE_DEFAULT

    def _load_file(self, path: pathlib.Path, source: str):
        if not path.exists():
            return
        try:
            with open(path, "r") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Error loading config '{path}': {e}", file=sys.stderr)
            return
        if loaded is None:
            return
        if not isinstance(loaded, dict):
            print(f"Warning: config file '{path}' does not contain a mapping.", file=sys.stderr)
            return
        for key, value in loaded.items():
            if key in DEFAULT_CONFIG:
                self._config[key] = value
                self._sources[key] = source

    def _load_env_vars(self):
        for key in DEFAULT_CONFIG.keys():
            env_var_name = ENV_VAR_PREFIX + key.upper()
            env_var_value_str = os.getenv(env_var_name)
            if env_var_value_str is None:
                continue
            default_value = DEFAULT_CONFIG[key]
            if isinstance(default_value, bool):
                actual_value = env_var_value_str.lower() in ("true", "1", "yes")
            else:
                actual_value = env_var_value_str
            self._config[key] = actual_value
            self._sources[key] = f"{SOURCE_ENV_VAR} ({env_var_name})"

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def get_with_source(self, key: str) -> Optional[Tuple[Any, str]]:
        if key in self._config:
            return self._config[key], self._sources.get(key, "Unknown")
        elif key in DEFAULT_CONFIG:
            return DEFAULT_CONFIG[key], SOURCE_DEFAULT
        return None

    def get_all_with_sources(self) -> Dict[str, Tuple[Any, str]]:
        all_data = {}
        for key in DEFAULT_CONFIG.keys():
            all_data[key] = (
                self._config.get(key, DEFAULT_CONFIG[key]),
                self._sources.get(key, SOURCE_DEFAULT),
            )
        return all_data

    def update_from_cli(self, key: str, value: Any):
        if value is None:
            return
        if key in DEFAULT_CONFIG and isinstance(DEFAULT_CONFIG[key], bool) and not isinstance(value, bool):
            value = str(value).lower() in ("true", "1", "yes")
        self._config[key] = value
        self._sources[key] = SOURCE_CLI
