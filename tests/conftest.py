# tests/conftest.py
"""
Central test configuration and fixtures.
This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""
import pytest
import os
from unittest.mock import patch
from fastapi.testclient import TestClient

# Set up test environment variables before any app imports
# so the module-level config in scheduled_sending.main picks them up
TEST_ENV = {
    "DOCUSIGN_BASE_PATH": "https://demo.docusign.net/restapi",
    "DOCUSIGN_ACCESS_TOKEN": "test_access_token",
    "DOCUSIGN_ACCOUNT_ID": "test_account_id",
    "DOCUSIGN_DOC_PDF": "/nonexistent/World_Wide_Corp_lorem.pdf",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value

from scheduled_sending.main import app, config

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n**signature_1** /sn1/\n%%EOF\n"

@pytest.fixture
def client():
    """
    Provides a test client for making requests to our FastAPI app.
    This client simulates HTTP requests without starting a real server.
    """
    return TestClient(app)

@pytest.fixture
def sample_pdf(tmp_path):
    """A small PDF-like file on disk."""
    path = tmp_path / "World_Wide_Corp_lorem.pdf"
    path.write_bytes(PDF_BYTES)
    return path

@pytest.fixture
def configured_pdf(sample_pdf):
    """Points the app's configured document at the sample file."""
    with patch.dict(config, {"doc_pdf": str(sample_pdf)}):
        yield sample_pdf

@pytest.fixture
def mock_envelopes_api():
    """
    Replaces the SDK's EnvelopesApi so no request leaves the process.
    Yields the instance the service will use.
    """
    with patch("scheduled_sending.services.docusign_service.EnvelopesApi") as api_cls:
        yield api_cls.return_value
