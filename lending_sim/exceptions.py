"""Custom exception hierarchy for lending-sim.

Contract operations never raise: they report failures through
:class:`lending_sim.models.Result`.  These exceptions signal misuse of the
simulation environment itself.
"""


class LendingSimError(Exception):
    """Base exception for all lending-sim errors."""


class ContractCallError(LendingSimError):
    """Raised when unwrapping a failed contract result."""

    def __init__(self, code: int, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or f"Contract call failed with error {code}")


class UnknownContractError(LendingSimError):
    """Raised when a contract name is not present in the registry."""


class ConfigurationError(LendingSimError):
    """Raised when configuration is invalid or missing."""
