from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_ssid_list(text: str) -> frozenset[str]:
    """One SSID per line, kept verbatim apart from the line terminator.

    Empty lines are ignored. Leading and trailing spaces are part of the SSID.
    """

    return frozenset(line for line in text.splitlines() if line)


def load_ssid_list(path: Path) -> frozenset[str] | None:
    """Load an SSID list file.

    Returns None when the file is absent or cannot be read, in which case the
    caller skips the corresponding check.
    """

    if not path.is_file():
        return None

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("ignoring unreadable SSID list %s: %s", path, e)
        return None

    return parse_ssid_list(text)
