"""Transaction context threaded through every contract operation."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class TxContext:
    """Identity and clock seen by a single contract call.

    Attributes
    ----------
    sender : str | None
        Principal acting in the transaction (``tx-sender``).
    contract_owner : str | None
        Principal allowed to run privileged operations.
    contract_caller : str | None
        Name of the contract that issued the current call, or None when
        called directly.
    block_height : int
        Caller-controlled logical clock used to timestamp records.
    """

    sender: str | None = None
    contract_owner: str | None = None
    contract_caller: str | None = None
    block_height: int = 1

    @property
    def is_owner(self) -> bool:
        return self.sender is not None and self.sender == self.contract_owner

    def as_caller(self, contract_name: str) -> "TxContext":
        """Context for a nested call issued by ``contract_name``."""
        return replace(self, contract_caller=contract_name)
