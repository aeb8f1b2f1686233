from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Final


class ExitCode(IntEnum):
    SUCCESS = 0
    NOT_ON_AC = 20
    BATTERY_NOT_FULL = 21
    LOAD_TOO_HIGH = 22
    NO_SSID = 30
    SSID_NOT_ACCEPTED = 31
    SSID_REJECTED = 32


FULL_BATTERY_PERCENT: Final[int] = 100
DEFAULT_WIFI_INTERFACE: Final[str] = "en0"
ACCEPT_LIST_FILENAME: Final[str] = "accept-list.txt"
REJECT_LIST_FILENAME: Final[str] = "reject-list.txt"


@dataclass(frozen=True)
class PowerState:
    on_ac_power: bool
    battery_percent: int | None


@dataclass(frozen=True)
class LoadState:
    load_average: float
    physical_cores: int


@dataclass(frozen=True)
class NetworkIdentity:
    ssid: str | None = None


@dataclass(frozen=True)
class ListsConfig:
    accept_list_path: Path
    reject_list_path: Path


@dataclass
class Config:
    wifi_interface: str = DEFAULT_WIFI_INTERFACE
    accept_list: str | None = None
    reject_list: str | None = None


@dataclass(frozen=True)
class Outcome:
    code: ExitCode
    reason: str
    check: str = ""

    @property
    def ok(self) -> bool:
        return self.code == ExitCode.SUCCESS


SUCCESS: Final[Outcome] = Outcome(ExitCode.SUCCESS, "powerful connection")
