"""
Custom exception classes for the application.

Integrations raise these; services convert them into result objects.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "CATALOG_REQUEST_FAILED")
        message: Human-readable message
        status_code: HTTP-style status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to a loggable/serializable structure."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class ExternalServiceError(AppError):
    """External service failure (503)."""

    def __init__(
        self,
        service: str,
        message: str,
        code: Optional[str] = None,
        status_code: int = 503,
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code or f"{service.upper()}_ERROR",
            message=message,
            status_code=status_code,
            details={"service": service, **(details or {})}
        )


# ===================
# FEED ERRORS
# ===================

class FeedParseError(ValidationError):
    """Stock feed file could not be read."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="FEED_PARSE_ERROR",
            message=message,
            details=details
        )


class FeedDownloadError(ExternalServiceError):
    """FTP transfer of the stock feed failed."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            service="ftp",
            code="FEED_DOWNLOAD_FAILED",
            message=message,
            details=details
        )


# ===================
# CATALOG API ERRORS
# ===================

class CatalogRequestError(ExternalServiceError):
    """Catalog API answered with a non-2xx status."""

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        body: str
    ):
        self.body = body
        super().__init__(
            service="catalog",
            code="CATALOG_REQUEST_FAILED",
            message=f"{method} {url} returned {status_code}",
            status_code=status_code,
            details={"method": method, "url": url, "body": body}
        )


class CatalogTransportError(ExternalServiceError):
    """Catalog API could not be reached."""

    def __init__(self, method: str, url: str, error: str):
        super().__init__(
            service="catalog",
            code="CATALOG_UNREACHABLE",
            message=f"{method} {url} failed: {error}",
            details={"method": method, "url": url, "original_error": error}
        )


class MalformedResponseError(ExternalServiceError):
    """Catalog API body did not match the expected shape."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            service="catalog",
            code="CATALOG_MALFORMED_RESPONSE",
            message=f"Unexpected response from {url}: {reason}",
            status_code=502,
            details={"url": url, "reason": reason}
        )
