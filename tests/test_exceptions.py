"""
Tests for custom exception classes.
"""

from common.exceptions import (
    BrevoSyncException,
    BrevoAPIException,
    ContactNotFoundException,
    ContactCreateException,
    PageFetchException,
    ValidationException,
)


def test_sync_exception_basic():
    """Test basic BrevoSyncException functionality"""
    exc = BrevoSyncException("Test error")
    assert str(exc) == "Test error"
    assert exc.details == {}


def test_sync_exception_with_details():
    """Test BrevoSyncException with details dict"""
    details = {"email": "jane@example.com"}
    exc = BrevoSyncException("Test error", details=details)
    assert exc.details == details


def test_brevo_api_exception_status_code():
    """Status code is read from details"""
    exc = BrevoAPIException("API call failed", {"status_code": 401})
    assert isinstance(exc, BrevoSyncException)
    assert exc.status_code == 401


def test_brevo_api_exception_without_status():
    exc = BrevoAPIException("Connection reset")
    assert exc.status_code is None


def test_contact_not_found_is_api_exception():
    exc = ContactNotFoundException("Contact does not exist", {"status_code": 404})
    assert isinstance(exc, BrevoAPIException)
    assert exc.status_code == 404


def test_contact_create_exception():
    exc = ContactCreateException("Failed to create contact: boom", {"email": "jane@example.com"})
    assert isinstance(exc, BrevoSyncException)
    assert exc.details["email"] == "jane@example.com"


def test_page_fetch_exception():
    """PageFetchException keeps the cursor it failed at"""
    exc = PageFetchException("page failed", offset=100, limit=50)
    assert isinstance(exc, BrevoSyncException)
    assert exc.offset == 100
    assert exc.limit == 50
    assert exc.details == {}


def test_validation_exception():
    exc = ValidationException("Invalid date format provided")
    assert isinstance(exc, BrevoSyncException)
    assert str(exc) == "Invalid date format provided"
