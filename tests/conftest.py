import os
import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture(autouse=True)
def mock_env_vars():
    """Mock environment variables needed for testing"""
    with patch.dict(os.environ, {'OPENAI_API_KEY': 'test_key'}):
        yield


@pytest.fixture
def settings():
    return Settings(api_key="test_key", model="test-model", port=5001)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


@pytest.fixture
def mock_pipeline():
    """Replace the PDF extractor and the model call used by the flashcard service."""
    with patch('app.services.flashcard_service.extract_text') as mock_extract, \
         patch('app.services.flashcard_service.generate_text') as mock_generate:
        mock_extract.return_value = "The heart has four chambers."
        yield mock_extract, mock_generate
