"""
Domain Exceptions.

Custom exceptions for domain-level errors raised by the catalog
ingestion pipeline and the ERP synchronization layer.
"""

from typing import Optional, Any, Dict


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "DOMAIN_ERROR"
        self.details = details or {}


class ValidationException(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field, "value": str(value) if value is not None else None}
        )


# =============================================================================
# CATALOG FEED
# =============================================================================

class FeedFetchException(DomainException):
    """Raised when the vendor feed cannot be downloaded."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        super().__init__(
            message=f"Failed to fetch catalog feed: {reason}",
            code="FEED_FETCH_ERROR",
            details={"url": url, "status_code": status_code}
        )
        self.status_code = status_code


class FeedParseException(DomainException):
    """Raised when the vendor feed is not well-formed XML."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Failed to parse catalog feed: {reason}",
            code="FEED_PARSE_ERROR",
        )


class InvalidPayloadException(ValidationException):
    """
    Raised when a catalog item payload cannot be applied at all.

    Terminal for the unit of work: retrying the same payload
    cannot succeed.
    """


class MediaDownloadException(DomainException):
    """Raised when a single media URL cannot be downloaded."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            message=f"Failed to download '{url}': {reason}",
            code="MEDIA_DOWNLOAD_ERROR",
            details={"url": url}
        )


# =============================================================================
# ERP
# =============================================================================

class ErpPublishException(DomainException):
    """Raised when an envelope cannot be published to the ERP broker."""

    def __init__(self, queue_name: str, reason: str):
        super().__init__(
            message=f"Failed to publish to ERP queue '{queue_name}': {reason}",
            code="ERP_PUBLISH_ERROR",
            details={"queue": queue_name}
        )
