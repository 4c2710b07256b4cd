"""Error Hierarchy — typed, categorized exceptions for every protocol-level failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Protocol errors carry an explicit HTTP status and optional response headers
    - to_outcome() converts a protocol error into a ProtocolFailure outcome
    - ConfigurationError is raised, never converted: it is a deployment error

Design Decisions:
    - Single hierarchy with GraphQLHTTPError base: one global handler catches all
    - Engine errors (parse, validation, execution) are NOT part of this hierarchy;
      they stay inside the engine's own error list
"""

from enum import Enum

from graphql_http.core.outcome import ProtocolFailure


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    REQUEST = "request"
    METHOD = "method"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class GraphQLHTTPError(Exception):
    """Base exception for all adapter errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.headers = headers or {}

    def to_outcome(self) -> ProtocolFailure:
        """Convert to the ProtocolFailure variant of Outcome."""
        return ProtocolFailure(
            status=self.http_status,
            message=self.message,
            headers=dict(self.headers),
            code=self.code,
            category=self.category.value,
        )

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {"errors": [{"message": self.message}]}


# ─── Protocol Errors (4xx) ──────────────────────────────────────

class MethodNotAllowedError(GraphQLHTTPError):
    """HTTP method cannot perform the requested work."""
    def __init__(self, message: str, allowed: str):
        super().__init__(
            message, "METHOD_NOT_ALLOWED", ErrorCategory.METHOD,
            ErrorSeverity.WARNING, 405, {"Allow": allowed},
        )
        self.allowed = allowed


class MissingQueryError(GraphQLHTTPError):
    """Request carried no query text."""
    def __init__(self):
        super().__init__(
            "Must provide query string.", "MISSING_QUERY",
            ErrorCategory.REQUEST, ErrorSeverity.WARNING, 400,
        )


class InvalidVariablesError(GraphQLHTTPError):
    """Variables were sent as a string that is not a JSON object."""
    def __init__(self):
        super().__init__(
            "Variables are invalid JSON.", "INVALID_VARIABLES",
            ErrorCategory.REQUEST, ErrorSeverity.WARNING, 400,
        )


class InvalidBodyError(GraphQLHTTPError):
    """Request body could not be decoded."""
    def __init__(self, message: str):
        super().__init__(
            message, "INVALID_BODY",
            ErrorCategory.REQUEST, ErrorSeverity.WARNING, 400,
        )


class UnsupportedCharsetError(GraphQLHTTPError):
    """Request body declared a charset the decoder cannot read."""
    def __init__(self, charset: str):
        super().__init__(
            f'Unsupported charset "{charset.upper()}".', "UNSUPPORTED_CHARSET",
            ErrorCategory.REQUEST, ErrorSeverity.WARNING, 415,
        )
        self.charset = charset


# ─── Configuration Errors (fatal) ───────────────────────────────

class ConfigurationError(GraphQLHTTPError):
    """Adapter options are missing or malformed."""
    def __init__(self, message: str):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500,
        )
