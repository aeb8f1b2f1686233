from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Protocol

from powerful_connection.store.ssid_list import load_ssid_list

from .types import (
    FULL_BATTERY_PERCENT,
    SUCCESS,
    ExitCode,
    ListsConfig,
    LoadState,
    NetworkIdentity,
    Outcome,
    PowerState,
)

logger = logging.getLogger(__name__)


class HostProvider(Protocol):
    def query_power_state(self) -> PowerState: ...

    def query_load_state(self) -> LoadState: ...

    def query_network_identity(self) -> NetworkIdentity: ...


def check_power(power: PowerState) -> Outcome | None:
    if power.on_ac_power:
        return None
    return Outcome(ExitCode.NOT_ON_AC, "not plugged in to AC power", check="power")


def check_battery(power: PowerState) -> Outcome | None:
    if power.battery_percent == FULL_BATTERY_PERCENT:
        return None
    if power.battery_percent is None:
        return Outcome(ExitCode.BATTERY_NOT_FULL, "battery level unavailable", check="battery")
    return Outcome(
        ExitCode.BATTERY_NOT_FULL,
        f"battery at {power.battery_percent}%, not full",
        check="battery",
    )


def check_load(load: LoadState) -> Outcome | None:
    # floor(x) < n is x < n for integer n; comparing floats keeps nan/inf from raising.
    if load.load_average < load.physical_cores:
        return None
    return Outcome(
        ExitCode.LOAD_TOO_HIGH,
        f"load average {load.load_average:.2f} with {load.physical_cores} physical cores",
        check="load",
    )


def check_ssid(network: NetworkIdentity) -> Outcome | None:
    if network.ssid:
        return None
    return Outcome(ExitCode.NO_SSID, "not associated with a wireless network", check="ssid")


def check_accept_list(ssid: str, accepted: frozenset[str] | None) -> Outcome | None:
    if accepted is None or ssid in accepted:
        return None
    return Outcome(
        ExitCode.SSID_NOT_ACCEPTED,
        f"SSID {ssid!r} is not in the accept list",
        check="accept_list",
    )


def check_reject_list(ssid: str, rejected: frozenset[str] | None) -> Outcome | None:
    if rejected is None or ssid not in rejected:
        return None
    return Outcome(
        ExitCode.SSID_REJECTED,
        f"SSID {ssid!r} is in the reject list",
        check="reject_list",
    )


class Evaluator:
    """Decide whether the host has a "powerful connection".

    Order: AC power, battery, load, SSID, accept list, reject list. The first
    failing check ends evaluation; later state is never queried.
    """

    def __init__(self, provider: HostProvider, lists: ListsConfig):
        self._provider = provider
        self._lists = lists

    def iter_checks(self) -> Iterator[tuple[str, Outcome | None]]:
        """Yield (check name, failure or None) for each check reached."""

        power = self._provider.query_power_state()
        for name, result in (("power", check_power(power)), ("battery", check_battery(power))):
            yield name, result
            if result is not None:
                return

        result = check_load(self._provider.query_load_state())
        yield "load", result
        if result is not None:
            return

        network = self._provider.query_network_identity()
        result = check_ssid(network)
        yield "ssid", result
        if result is not None:
            return

        ssid = network.ssid or ""

        result = check_accept_list(ssid, load_ssid_list(self._lists.accept_list_path))
        yield "accept_list", result
        if result is not None:
            return

        yield "reject_list", check_reject_list(ssid, load_ssid_list(self._lists.reject_list_path))

    def evaluate(self) -> Outcome:
        for name, result in self.iter_checks():
            if result is not None:
                return result
            logger.info("%s check passed", name)
        return SUCCESS
