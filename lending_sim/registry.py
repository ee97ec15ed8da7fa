"""Registry mapping contract names to contract instances."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from lending_sim.contracts.base import Contract, ContractName
from lending_sim.exceptions import ConfigurationError, UnknownContractError


def _key(name: object) -> object:
    return name.value if isinstance(name, ContractName) else name


def contract_name_from_path(path: str) -> str:
    """Derive a contract name from a name or a ``.clar`` source path."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if name.endswith(".clar"):
        name = name[: -len(".clar")]
    return name


class ContractRegistry:
    """Name -> contract mapping used to resolve cross-contract calls.

    Parameters
    ----------
    expected_types : Mapping[str, type[Contract]] | None
        Contract class required for each well-known name.  Linking an
        instance of another class under such a name raises
        :class:`ConfigurationError`.
    """

    def __init__(self, expected_types: Mapping[str, type[Contract]] | None = None) -> None:
        self._contracts: dict[str, Contract] = {}
        self._expected_types = dict(expected_types or {})

    def link(self, contracts: Mapping[str, Contract]) -> None:
        """Merge contracts into the registry; last write wins per name."""
        for name, contract in contracts.items():
            key = _key(name)
            expected = self._expected_types.get(key)
            if expected is not None and not isinstance(contract, expected):
                raise ConfigurationError(
                    f"Contract {key!r} must be a {expected.__name__}, "
                    f"got {type(contract).__name__}"
                )
        for name, contract in contracts.items():
            key = _key(name)
            self._contracts[key] = contract

    def get(self, name: str) -> Contract:
        key = _key(name)
        try:
            return self._contracts[key]
        except KeyError:
            raise UnknownContractError(f"Contract {key!r} is not registered") from None

    def clear(self) -> None:
        self._contracts.clear()

    def __contains__(self, name: object) -> bool:
        key = _key(name)
        return key in self._contracts

    def __iter__(self) -> Iterator[str]:
        return iter(self._contracts)

    def __len__(self) -> int:
        return len(self._contracts)
