from .config import load_config
from .paths import (
    CONFIG_DIR_ENV,
    get_config_dir,
    get_config_path,
    resolve_lists_config,
)
from .ssid_list import load_ssid_list, parse_ssid_list

__all__ = [
    "CONFIG_DIR_ENV",
    "get_config_dir",
    "get_config_path",
    "load_config",
    "load_ssid_list",
    "parse_ssid_list",
    "resolve_lists_config",
]
