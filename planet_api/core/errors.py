"""Error Hierarchy — typed, categorized exceptions for every Planets API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 4xx with severity ERROR; infrastructure errors are 5xx CRITICAL
    - to_response() produces the REST envelope rendered by the global handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PlanetApiError base: one global handler catches all
    - PlanetNotFoundError is raised by the gateway; the controller translates it into
      the action-specific ResourceNotFoundError ("Cannot PUT /planets/7")
    - Store failures other than a missing record are DatabaseError (500), never 404
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    UPLOAD = "upload"
    DATABASE = "database"
    STORAGE = "storage"
    INTERNAL = "internal"


class PlanetApiError(Exception):
    """Base exception for all Planets API errors."""

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
        self.headers = headers

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class AuthenticationRequiredError(PlanetApiError):
    """Missing or invalid credentials on a protected route."""
    def __init__(self):
        super().__init__(
            "Unauthorized", "AUTHENTICATION_REQUIRED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, 401,
            headers={"WWW-Authenticate": "Basic"},
        )


class InvalidPlanetIdError(PlanetApiError):
    """Route id segment is not made of decimal digits."""
    def __init__(self, raw_id: str):
        super().__init__(
            f"Invalid planet id: {raw_id!r}", "INVALID_PLANET_ID",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 404,
        )
        self.raw_id = raw_id


class RouteNotFoundError(PlanetApiError):
    """No route handles this method and path."""
    def __init__(self, method: str, path: str, http_status: int = 404):
        super().__init__(
            f"Cannot {method} {path}", "ROUTE_NOT_FOUND",
            ErrorCategory.ROUTE_NOT_FOUND, ErrorSeverity.WARNING, http_status,
        )


class ResourceNotFoundError(PlanetApiError):
    """Requested planet does not exist for the attempted action."""
    def __init__(self, method: str, path: str):
        super().__init__(
            f"Cannot {method} {path}", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, 404,
        )


class PlanetNotFoundError(PlanetApiError):
    """Gateway signal: no planet row for this id."""
    def __init__(self, planet_id: int):
        super().__init__(
            f"Planet {planet_id} not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, 404,
        )
        self.planet_id = planet_id


class PhotoMissingError(PlanetApiError):
    """Photo upload request carried no file."""
    def __init__(self):
        super().__init__(
            "No photo file uploaded.", "PHOTO_MISSING",
            ErrorCategory.UPLOAD, ErrorSeverity.ERROR, 400,
        )


class TooManyPhotosError(PlanetApiError):
    """More than one file sent in the photo field."""
    def __init__(self):
        super().__init__(
            "Only one photo file may be uploaded.", "TOO_MANY_PHOTOS",
            ErrorCategory.UPLOAD, ErrorSeverity.ERROR, 400,
        )


class UnsupportedPhotoTypeError(PlanetApiError):
    """Photo content type is not in the allowed list."""
    def __init__(self, content_type: str | None, allowed: list[str]):
        super().__init__(
            f"Photo must be one of: {', '.join(allowed)}.", "UNSUPPORTED_PHOTO_TYPE",
            ErrorCategory.UPLOAD, ErrorSeverity.ERROR, 400,
        )
        self.content_type = content_type


class PhotoTooLargeError(PlanetApiError):
    """Photo exceeded the configured byte limit."""
    def __init__(self, max_bytes: int):
        super().__init__(
            f"Photo exceeds the maximum size of {max_bytes} bytes.", "PHOTO_TOO_LARGE",
            ErrorCategory.UPLOAD, ErrorSeverity.ERROR, 413,
        )
        self.max_bytes = max_bytes


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PlanetApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class PhotoStorageError(PlanetApiError):
    """Writing or removing a file in the content store failed."""
    def __init__(self, operation: str):
        super().__init__(
            f"Photo {operation} failed", "PHOTO_STORAGE_ERROR",
            ErrorCategory.STORAGE, ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
