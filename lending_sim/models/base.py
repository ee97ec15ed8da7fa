"""Result envelope and error codes shared by every contract."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from lending_sim.exceptions import ContractCallError


class ErrorCode(IntEnum):
    """Stable numeric error codes emitted by contract operations."""

    INVALID_STATE = 400
    UNVERIFIED_LENDER = 401
    UNAUTHORIZED = 403
    NOT_FOUND = 404


@dataclass(frozen=True)
class Result:
    """Tagged outcome of a contract operation.

    ``success`` is True with an optional ``value``, or False with an
    ``error`` code.  Failures are ordinary values; nothing is raised.
    """

    success: bool
    value: Any = None
    error: ErrorCode | None = None

    @classmethod
    def ok(cls, value: Any = None) -> "Result":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, code: ErrorCode) -> "Result":
        return cls(success=False, error=code)

    def unwrap(self) -> Any:
        """Return the value, raising ContractCallError on failure."""
        if not self.success:
            raise ContractCallError(int(self.error))
        return self.value


# Module-level shorthands keep contract bodies readable
OK = Result.ok()
NOT_FOUND = Result.fail(ErrorCode.NOT_FOUND)
UNAUTHORIZED = Result.fail(ErrorCode.UNAUTHORIZED)
INVALID_STATE = Result.fail(ErrorCode.INVALID_STATE)
UNVERIFIED_LENDER = Result.fail(ErrorCode.UNVERIFIED_LENDER)
