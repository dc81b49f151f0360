from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Standardized error codes for table construction."""
    DATA_ACCESS_FAILURE = "DATA_ACCESS_FAILURE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ErrorStage(str, Enum):
    """Point in the result-source interaction where a failure happened."""
    EXECUTE = "execute"
    METADATA = "metadata"
    ADVANCE = "advance"
    FETCH = "fetch"


class AsciiTableError(Exception):
    """Base class for errors raised by sql_ascii_table.

    Attributes:
        message (str): A human-readable error message.
        error_code (ErrorCode): The standardized error code.
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataAccessFailure(AsciiTableError):
    """The result source failed during execution, metadata lookup, advance or fetch.

    The underlying exception is chained as ``__cause__``; it is never retried.

    Attributes:
        stage (Optional[ErrorStage]): Where the source failed.
    """

    error_code = ErrorCode.DATA_ACCESS_FAILURE

    def __init__(self, message: str, stage: Optional[ErrorStage] = None):
        super().__init__(message)
        self.stage = stage

    @classmethod
    def from_exception(cls, exc: BaseException, stage: Optional[ErrorStage] = None) -> "DataAccessFailure":
        return cls(f"Unable to get table data : {exc}", stage=stage)
