"""Namespaced in-memory storage shared by every contract."""

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Storage:
    """In-memory store backing all simulated contracts.

    Three namespaces mirror the on-chain data model:

    - ``maps``: map name -> key -> record (``assets``, ``loans``, ...)
    - ``vars``: scalar data vars such as id counters
    - ``nfts``: reserved for non-fungible token tables, unused today

    Maps are created lazily on first write so an empty store reads the
    same as one that has never been touched.
    """

    maps: dict[str, dict[Hashable, Any]] = field(default_factory=dict)
    vars: dict[str, Any] = field(default_factory=dict)
    nfts: dict[str, dict[Hashable, str]] = field(default_factory=dict)

    # Map access
    def map_get(self, map_name: str, key: Hashable) -> Any | None:
        """Return the record stored under ``key`` or None."""
        return self.maps.get(map_name, {}).get(key)

    def map_set(self, map_name: str, key: Hashable, record: Any) -> None:
        """Insert or overwrite the record stored under ``key``."""
        self.maps.setdefault(map_name, {})[key] = record

    def map_contains(self, map_name: str, key: Hashable) -> bool:
        return key in self.maps.get(map_name, {})

    def map_values(self, map_name: str) -> list[Any]:
        """Return every record in a map, in insertion order."""
        return list(self.maps.get(map_name, {}).values())

    def map_items(self, map_name: str) -> list[tuple[Hashable, Any]]:
        return list(self.maps.get(map_name, {}).items())

    # Var access
    def var_get(self, var_name: str, default: Any = None) -> Any:
        return self.vars.get(var_name, default)

    def var_set(self, var_name: str, value: Any) -> None:
        self.vars[var_name] = value

    def next_id(self, counter: str) -> int:
        """Advance a sequence counter and return the new 1-based value."""
        new_id = self.vars.get(counter, 0) + 1
        self.vars[counter] = new_id
        return new_id

    def reset(self) -> None:
        """Drop every namespace."""
        self.maps = {}
        self.vars = {}
        self.nfts = {}

    def summary(self) -> dict[str, int]:
        """Return record counts per map."""
        return {name: len(records) for name, records in self.maps.items()}
