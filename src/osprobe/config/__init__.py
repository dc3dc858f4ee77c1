from __future__ import annotations

from .paths import APP_NAME, CONFIG_FILENAME, default_config_path, expand_path
from .settings import (
    CONFIG_ENV_VAR,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_RANGE,
    FALLBACK_COMMAND,
    PRIMARY_COMMAND,
    ScanningConfig,
    Settings,
    SSHConfig,
    get_settings,
    load_settings,
    render_settings_toml,
    resolve_config_path,
    write_settings,
)

__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "DEFAULT_OUTPUT_FILE",
    "DEFAULT_RANGE",
    "FALLBACK_COMMAND",
    "PRIMARY_COMMAND",
    "SSHConfig",
    "ScanningConfig",
    "Settings",
    "default_config_path",
    "expand_path",
    "get_settings",
    "load_settings",
    "render_settings_toml",
    "resolve_config_path",
    "write_settings",
]
