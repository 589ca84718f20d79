"""
Pytest configuration: adds src/ to the path so all modules can be imported.
"""

import sys
import os

import pytest
from unittest.mock import MagicMock, patch

# Add the src directory so action modules can be imported without packaging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))


@pytest.fixture
def mock_brevo_client():
    """Mock the client BaseActionHandler builds for each call."""
    with patch("common.brevo_client.BrevoClient") as mock_cls:
        client = MagicMock()
        mock_cls.return_value = client
        client.mock_cls = mock_cls
        yield client


@pytest.fixture
def api_key():
    return "xkeysib-test-key"
