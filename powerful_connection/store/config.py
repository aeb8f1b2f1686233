from __future__ import annotations

import tomllib
from pathlib import Path

from powerful_connection.engine.types import Config
from powerful_connection.store.paths import get_config_path


def load_config(path: Path | None = None) -> tuple[Config, dict]:
    """Load config.toml, returning (Config, meta).

    The file is optional and never created. Meta carries diagnostics for
    verbose output.
    """

    config_path = path or get_config_path()
    meta: dict = {"path": str(config_path), "loaded": False}

    if not config_path.exists():
        return Config(), meta

    try:
        raw = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        meta["error"] = f"config_read_error: {e}"
        return Config(), meta

    cfg = Config()

    iface = raw.get("wifi_interface")
    if isinstance(iface, str) and iface.strip():
        cfg.wifi_interface = iface.strip()

    lists = raw.get("lists")
    if isinstance(lists, dict):
        accept = lists.get("accept")
        if isinstance(accept, str) and accept.strip():
            cfg.accept_list = accept.strip()

        reject = lists.get("reject")
        if isinstance(reject, str) and reject.strip():
            cfg.reject_list = reject.strip()

    meta["loaded"] = True
    return cfg, meta
