"""
Exceptions raised by table handles and the value converter.

Organized by category:
1. Configuration and Input Errors
2. Conversion Errors
3. Item Not Found
4. Remote Operation Errors

Every remote failure is wrapped in an OperationError subclass, so callers can
tell "the item is absent" (ItemNotFoundError) apart from "the call failed".
"""

from typing import Any, Dict, List, Optional

from .base import DDBTableError


# =============================================================================
# Configuration and Input Errors
# =============================================================================

class ConfigurationError(DDBTableError):
    """Raised when a table handle or SDK client cannot be configured.

    Used for:
    - Missing or empty region, table name or partition key name
    - SDK client construction failures (e.g. no region resolvable)
    """

    def __init__(self, message: str, fields: Optional[List[str]] = None, original_error: Optional[Exception] = None):
        """Initialize configuration error.

        Args:
            message: Human-readable error message
            fields: Names of the invalid configuration fields
            original_error: The original exception that caused this error
        """
        self.fields = fields or []
        super().__init__(message, original_error, self.build_context(fields=self.fields))


class ValidationError(DDBTableError):
    """Raised when caller input is structurally unusable."""

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        super().__init__(message, original_error, self.build_context(validation_errors=self.errors))


# =============================================================================
# Conversion Errors
# =============================================================================

class ConversionError(DDBTableError):
    """Raised when a value has no mapping to or from the wire format.

    Used for:
    - Unsupported Python types on write (None, bytes, sets, arbitrary objects)
    - Non-string mapping keys
    - Unknown or malformed attribute tags on read
    """

    def __init__(self, message: str, path: str = "", value_type: Optional[str] = None):
        """Initialize conversion error.

        Args:
            message: Human-readable error message
            path: Location of the offending value inside the item (e.g. ``tags[2].raw``)
            value_type: Name of the offending type or attribute tag
        """
        self.path = path
        self.value_type = value_type
        super().__init__(message, None, self.build_context(path=path, value_type=value_type))


# =============================================================================
# Item Not Found
# =============================================================================

class ItemNotFoundError(DDBTableError):
    """Raised when GetItem returns no item for the requested key."""

    def __init__(self, table_name: str, key: dict, original_error: Optional[Exception] = None):
        """Initialize item not found error.

        Args:
            table_name: Name of the DynamoDB table
            key: The key that was not found
            original_error: The original exception that caused this error
        """
        self.table_name = table_name
        self.key = key
        message = f"Item not found in table '{table_name}' with key: {key}"
        super().__init__(message, original_error, self.build_context(table_name=table_name, key=key))


# =============================================================================
# Remote Operation Errors
# =============================================================================

class OperationError(DDBTableError):
    """Raised when a call to DynamoDB fails.

    The wrapper never retries; ``retryable`` only reports whether the
    underlying error code is one the caller could reasonably retry
    (throttling, service unavailable, timeouts, dropped connections).
    """

    def __init__(
        self,
        message: str,
        operation: str,
        table_name: Optional[str] = None,
        error_code: Optional[str] = None,
        retryable: bool = False,
        original_error: Optional[Exception] = None
    ):
        """Initialize operation error.

        Args:
            message: Human-readable error message
            operation: The DynamoDB API operation that failed (e.g. "GetItem")
            table_name: The DynamoDB table name, if the operation is table-scoped
            error_code: Service error code or botocore exception class name
            retryable: Whether the failure is transient
            original_error: The original SDK exception
        """
        self.operation = operation
        self.table_name = table_name
        self.error_code = error_code
        self.retryable = retryable
        context = self.build_context(
            operation=operation,
            table_name=table_name,
            error_code=error_code,
            retryable=retryable
        )
        super().__init__(message, original_error, context)


class RetrievalError(OperationError):
    """Raised when GetItem fails."""


class WriteError(OperationError):
    """Raised when PutItem, UpdateItem or DeleteItem fails."""


class ScanError(OperationError):
    """Raised when a Scan page fails (full scans and partition key listings)."""


class ListError(OperationError):
    """Raised when ListTables fails."""
