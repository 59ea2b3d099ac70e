"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        NOT_FOUND: A component, language or key could not be located
        INVALID_INPUT: Input was rejected (unsafe keys, limits, bad config)
        PERMANENT_ERROR: Any other failure
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    PERMANENT_ERROR = "permanent_error"
