from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from powerful_connection.engine.evaluator import Evaluator, HostProvider
from powerful_connection.engine.types import ExitCode, ListsConfig
from powerful_connection.providers.macos import MacOSProvider
from powerful_connection.store import (
    get_config_dir,
    get_config_path,
    load_config,
    resolve_lists_config,
)

logger = logging.getLogger("powerful_connection")

_EPILOG = (
    "exit codes:\n"
    "  0   powerful connection\n"
    "  20  not on AC power\n"
    "  21  battery not fully charged\n"
    "  22  processor load too high\n"
    "  30  not associated with a wireless network\n"
    "  31  SSID not in accept-list.txt\n"
    "  32  SSID in reject-list.txt\n"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="powerful-connection",
        description=(
            "Exit 0 only when plugged in, fully charged, not overloaded and on an "
            "approved wireless network."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding accept-list.txt, reject-list.txt and config.toml",
    )
    parser.add_argument(
        "--show-paths", action="store_true", help="Print resolved file locations and exit"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every check")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Suppress diagnostics")
    return parser


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    if quiet:
        lvl = logging.CRITICAL
    elif verbose:
        lvl = logging.INFO
    else:
        lvl_name = os.getenv("LOG_LEVEL", "WARNING").upper()
        lvl = getattr(logging, lvl_name, logging.WARNING)

    logging.basicConfig(
        format="%(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once root has handlers; the package level must still apply.
    logger.setLevel(lvl)


def _show_paths(config_dir: Path, lists: ListsConfig) -> int:
    config_path = get_config_path(config_dir)
    print(f"config dir: {config_dir}")
    print(f"config: {config_path} (exists={config_path.exists()})")
    print(f"accept list: {lists.accept_list_path} (exists={lists.accept_list_path.exists()})")
    print(f"reject list: {lists.reject_list_path} (exists={lists.reject_list_path.exists()})")
    return 0


def run(evaluator: Evaluator) -> ExitCode:
    outcome = evaluator.evaluate()
    if outcome.ok:
        logger.info(outcome.reason)
    else:
        logger.error(
            "%s check failed: %s (exit %d)", outcome.check, outcome.reason, outcome.code
        )
    return outcome.code


def main(argv: list[str] | None = None, *, provider: HostProvider | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    config_dir = get_config_dir(args.config_dir)
    config, config_meta = load_config(get_config_path(config_dir))
    if config_meta.get("error"):
        logger.warning("config %s ignored: %s", config_meta["path"], config_meta["error"])

    lists = resolve_lists_config(config_dir, config)

    if args.show_paths:
        return _show_paths(config_dir, lists)

    if provider is None:
        provider = MacOSProvider(wifi_interface=config.wifi_interface)

    return int(run(Evaluator(provider, lists)))


if __name__ == "__main__":
    raise SystemExit(main())
