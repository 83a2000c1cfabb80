from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from lumenpipe.core.domain.error_codes import get_stellar_error_message


class ErrorKind(Enum):
    BUILD = "build"
    SIGN = "sign"
    SUBMIT = "submit"
    REJECTION = "rejection"
    NOT_FOUND = "not_found"


class ResultCodes(BaseModel):
    transaction: Optional[str] = None
    operations: List[str] = Field(default_factory=list)


class Rejection(BaseModel):
    """Structured error payload Horizon returns when it refuses a transaction."""

    status: int = 400
    title: str = ""
    detail: str = ""
    type: str = ""
    result_codes: ResultCodes = Field(default_factory=ResultCodes)
    result_xdr: Optional[str] = None
    envelope_xdr: Optional[str] = None

    def message(self) -> str:
        return get_stellar_error_message(self.result_codes.model_dump())


class LedgerError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BuildError(LedgerError):
    kind = ErrorKind.BUILD


class SignError(LedgerError):
    kind = ErrorKind.SIGN


class SubmitError(LedgerError):
    kind = ErrorKind.SUBMIT

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class RejectionError(SubmitError):
    kind = ErrorKind.REJECTION

    def __init__(self, rejection: Rejection):
        super().__init__(f"{rejection.title or 'Transaction rejected'}: {rejection.message()}", rejection.status)
        self.rejection = rejection


class NotFoundError(LedgerError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, address: str):
        super().__init__(f"Account {address} not found")
        self.address = address


class PipelineStateError(RuntimeError):
    """Tx methods called out of order. Raised immediately, never stored."""


def unwrap_rejection(error: Optional[BaseException]) -> Optional[Rejection]:
    """Return the Horizon rejection payload carried by error, if any."""
    if isinstance(error, RejectionError):
        return error.rejection
    return None


def error_string(error: Optional[BaseException]) -> str:
    if error is None:
        return ""
    rejection = unwrap_rejection(error)
    if rejection is not None:
        return rejection.message()
    return str(error)
