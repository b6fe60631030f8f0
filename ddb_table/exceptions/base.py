"""
Root of the ddb_table error hierarchy.

Every error carries a message, the SDK exception it wraps (if any) and a
flat context dict that is folded into ``str()`` so log lines show the table,
key, path or error code without extra formatting at the call site.
"""

from typing import Any, Dict, Optional


class DDBTableError(Exception):
    """Base exception for all ddb_table errors.

    Attributes:
        message: Human-readable error message
        original_error: The SDK exception that caused this error (if any)
        context: Details about the failure (table, key, path, error code...)
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = dict(context) if context else {}
        super().__init__(message)

    @staticmethod
    def build_context(**values: Any) -> Dict[str, Any]:
        """Collect keyword values into a context dict, leaving out unset ones.

        None, empty strings, empty containers and False are treated as unset,
        so subclasses can pass every optional attribute unconditionally.

        Example:
            DDBTableError.build_context(path="a.b", value_type=None)  # {'path': 'a.b'}
        """
        return {key: value for key, value in values.items() if value}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} (Context: {details})"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"original_error={self.original_error!r}, context={self.context!r})"
        )
