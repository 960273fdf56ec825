"""Custom exception hierarchy for slothkube configuration and ledger operations."""


class SlothKubeError(Exception):
    """Base exception for all slothkube errors.

    All slothkube-specific exceptions inherit from this class, enabling
    centralized exception handling at the pipeline boundary.
    """

    pass


class ConfigError(SlothKubeError):
    """Exception raised for cluster configuration errors.

    This exception is raised when configuration loading or parsing fails.
    It includes field-specific information to help users identify and fix
    configuration issues.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(SlothKubeError):
    """Exception raised when a configuration or state file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class LedgerError(SlothKubeError):
    """Exception raised when a deployment ledger operation fails.

    Attributes:
        operation: Ledger operation that failed (e.g. "state", "serialize")
        message: Human-readable error message
    """

    def __init__(self, operation: str, message: str) -> None:
        """Create a ledger error for the given operation."""
        self.operation = operation
        self.message = message
        super().__init__(f"Ledger {operation} failed: {message}")


class LedgerSerializationError(LedgerError):
    """Raised when a ledger output cannot be serialized for storage.

    Persisting a placeholder instead would silently break the hash chain,
    so callers always receive this error.
    """

    def __init__(self, message: str) -> None:
        """Create a serialization error."""
        super().__init__("serialize", message)


class SanitizationError(LedgerError):
    """Raised when a redacted copy of the cluster configuration cannot be made."""

    def __init__(self, message: str) -> None:
        """Create a sanitization error."""
        super().__init__("sanitize", message)


class ExportError(LedgerError):
    """Raised when stored stack outputs cannot be exported."""

    def __init__(self, message: str) -> None:
        """Create an export error."""
        super().__init__("export", message)
