"""
Custom exception classes for Brevo actions.
Provides structured error handling across all handlers.
"""


class BrevoSyncException(Exception):
    """Base exception for all Brevo operations"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class BrevoAPIException(BrevoSyncException):
    """Raised when a Brevo API call fails"""

    @property
    def status_code(self):
        return self.details.get("status_code")


class ContactNotFoundException(BrevoAPIException):
    """Raised when a contact lookup by email returns 404"""

    pass


class ContactCreateException(BrevoSyncException):
    """Raised when a contact could not be created"""

    pass


class PageFetchException(BrevoSyncException):
    """Raised when a page fetch aborts an in-progress collection"""

    def __init__(self, message: str, offset: int, limit: int, details: dict = None):
        super().__init__(message, details)
        self.offset = offset
        self.limit = limit


class ValidationException(BrevoSyncException):
    """Raised when input validation fails before any network call"""

    pass
