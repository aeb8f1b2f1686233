from __future__ import annotations

import logging
import math
import re
import subprocess

from ..engine.types import DEFAULT_WIFI_INTERFACE, LoadState, NetworkIdentity, PowerState

logger = logging.getLogger(__name__)

_PERCENT_RE = re.compile(r"(\d{1,3})%")
_NETWORK_PREFIXES = ("Current Wi-Fi Network:", "Current AirPort Network:")


class MacOSProvider:
    """macOS provider.

    Sources:
    - `pmset -g batt` for power source and battery charge
    - `sysctl -n vm.loadavg` / `sysctl -n hw.physicalcpu` for load and cores
    - `networksetup -getairportnetwork <iface>` for the associated SSID

    Notes:
    - Query failures never raise. Power and network fail closed; load falls
      back to 0.0 so an unparseable value does not block evaluation.
    """

    def __init__(self, *, wifi_interface: str = DEFAULT_WIFI_INTERFACE):
        self._wifi_interface = wifi_interface

    def _run(self, args: list[str]) -> str | None:
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=True,
            )
        except (subprocess.CalledProcessError, OSError) as e:
            logger.warning("%s failed: %s", args[0], e)
            return None
        return result.stdout

    def _parse_pmset(self, output: str) -> PowerState:
        on_ac = False
        percent: int | None = None

        for line in output.strip().split("\n"):
            if line.startswith("Now drawing from"):
                on_ac = "'AC Power'" in line
                continue

            # Battery lines look like: " -InternalBattery-0 (id=123)\t100%; charged; ..."
            if percent is None and "Battery" in line:
                m = _PERCENT_RE.search(line)
                if m:
                    percent = int(m.group(1))

        return PowerState(on_ac_power=on_ac, battery_percent=percent)

    def _parse_loadavg(self, output: str | None) -> float:
        # vm.loadavg reads as "{ 1.23 1.45 1.67 }"; the first value is the 1-minute average.
        tokens = (output or "").replace("{", " ").replace("}", " ").split()
        try:
            load = float(tokens[0])
        except (IndexError, ValueError):
            load = math.nan

        if not math.isfinite(load):
            logger.warning("unparseable load average %r, treating as 0", output)
            return 0.0
        return load

    def _parse_physical_cores(self, output: str | None) -> int:
        try:
            cores = int((output or "").strip())
        except ValueError:
            logger.warning("unparseable physical core count %r, treating as 1", output)
            return 1
        return max(cores, 1)

    def _parse_airport_network(self, output: str) -> str | None:
        # Only the separator space is dropped; SSIDs may start or end with spaces.
        for line in output.splitlines():
            for prefix in _NETWORK_PREFIXES:
                if line.startswith(prefix):
                    ssid = line[len(prefix):].removeprefix(" ")
                    return ssid or None
        return None

    def query_power_state(self) -> PowerState:
        output = self._run(["pmset", "-g", "batt"])
        if output is None:
            return PowerState(on_ac_power=False, battery_percent=None)
        return self._parse_pmset(output)

    def query_load_state(self) -> LoadState:
        load = self._parse_loadavg(self._run(["sysctl", "-n", "vm.loadavg"]))
        cores = self._parse_physical_cores(self._run(["sysctl", "-n", "hw.physicalcpu"]))
        return LoadState(load_average=load, physical_cores=cores)

    def query_network_identity(self) -> NetworkIdentity:
        output = self._run(["networksetup", "-getairportnetwork", self._wifi_interface])
        if output is None:
            return NetworkIdentity(ssid=None)
        return NetworkIdentity(ssid=self._parse_airport_network(output))
