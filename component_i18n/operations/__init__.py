"""Operation result types and status enums.

Result values let the engine implement its "safe" entry points without
using exceptions for routine fallback paths.
"""

from component_i18n.operations.result import OperationResult
from component_i18n.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
