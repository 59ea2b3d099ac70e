"""Operation result dataclass.

Uniform result returned from internal resolution steps, carrying either a
payload or the exception that explains the failure.
"""

from dataclasses import dataclass
from typing import Any, Optional

from component_i18n.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- payload on success
        error_code: Optional[str] -- machine error code on failure
        error: Optional[Exception] -- the typed error a hard caller re-raises
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful."""
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data."""
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def failure(
        cls,
        error: Exception,
        status: Optional[OperationStatus] = None,
    ) -> "OperationResult":
        """Create an error OperationResult from an exception.

        The status and error code are read from the exception when it
        exposes them (``status`` / ``code`` attributes).

        Args:
            error: The exception describing the failure
            status: Optional explicit status overriding the exception's

        Returns:
            OperationResult with a non-success status
        """
        effective_status = status or getattr(
            error, "status", OperationStatus.PERMANENT_ERROR
        )
        code = getattr(error, "code", None)
        return cls(
            status=effective_status,
            message=str(error),
            error_code=getattr(code, "value", code),
            error=error,
        )

    def unwrap(self) -> Any:
        """Return the payload or raise the captured error.

        Raises:
            Exception: The error captured by ``failure()``
            RuntimeError: If the result failed without a captured error
        """
        if self.is_success:
            return self.data
        if self.error is not None:
            raise self.error
        raise RuntimeError(self.message)

    def unwrap_or(self, default: Any) -> Any:
        """Return the payload, or ``default`` when the operation failed."""
        return self.data if self.is_success else default
