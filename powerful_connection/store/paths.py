from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

from powerful_connection.engine.types import (
    ACCEPT_LIST_FILENAME,
    REJECT_LIST_FILENAME,
    Config,
    ListsConfig,
)

APP_NAME = "powerful-connection"
CONFIG_DIR_ENV = "POWERFUL_CONNECTION_CONFIG_DIR"


def get_config_dir(override: Path | str | None = None) -> Path:
    """Resolve the per-user config dir: explicit override, env var, then platformdirs."""

    if override:
        return Path(override).expanduser()

    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()

    return Path(user_config_dir(APP_NAME))


def get_config_path(config_dir: Path | None = None) -> Path:
    return (config_dir or get_config_dir()) / "config.toml"


def _resolve_list_path(config_dir: Path, configured: str | None, default_name: str) -> Path:
    if not configured:
        return config_dir / default_name

    path = Path(configured).expanduser()
    # Relative entries in config.toml are relative to the config dir, not the cwd.
    return path if path.is_absolute() else config_dir / path


def resolve_lists_config(config_dir: Path, config: Config | None = None) -> ListsConfig:
    cfg = config or Config()
    return ListsConfig(
        accept_list_path=_resolve_list_path(config_dir, cfg.accept_list, ACCEPT_LIST_FILENAME),
        reject_list_path=_resolve_list_path(config_dir, cfg.reject_list, REJECT_LIST_FILENAME),
    )
