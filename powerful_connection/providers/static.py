from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from ..engine.types import LoadState, NetworkIdentity, PowerState


@dataclass
class StaticProvider:
    """Returns canned host state and counts how often each query ran."""

    power: PowerState
    load: LoadState
    network: NetworkIdentity = field(default_factory=NetworkIdentity)
    calls: Counter = field(default_factory=Counter)

    def query_power_state(self) -> PowerState:
        self.calls["power"] += 1
        return self.power

    def query_load_state(self) -> LoadState:
        self.calls["load"] += 1
        return self.load

    def query_network_identity(self) -> NetworkIdentity:
        self.calls["network"] += 1
        return self.network
