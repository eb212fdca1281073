"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,
    ExternalServiceError,

    # Feed
    FeedParseError,
    FeedDownloadError,

    # Catalog API
    CatalogRequestError,
    CatalogTransportError,
    MalformedResponseError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",
    "ExternalServiceError",

    # Feed
    "FeedParseError",
    "FeedDownloadError",

    # Catalog API
    "CatalogRequestError",
    "CatalogTransportError",
    "MalformedResponseError",
]
