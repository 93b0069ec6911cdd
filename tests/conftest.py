"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Mock settings/configuration
- Sample parts and boundaries
- Sample multipart bodies
- Temporary files
"""

import os
from typing import Generator, List

import pytest
import structlog

from mime_multipart.boundary import Boundary
from mime_multipart.config import Settings
from mime_multipart.models.part import Part
from .fixtures.messages import BOUNDARY, SAMPLE_MESSAGES


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create mock settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="INFO",
        log_json=False,  # Easier to read in tests
        line_ending="\n",
        boundary_prefix="=_",
        max_message_size_mb=1,
    )


@pytest.fixture
def boundary() -> Boundary:
    """Boundary provider with the fixed token used by the sample bodies."""
    return Boundary(BOUNDARY)


@pytest.fixture
def text_part() -> Part:
    """Plain text part with a bracketed Content-ID."""
    return Part(
        content="Hello, world.",
        type="text/plain; charset=utf-8",
        encoding="8bit",
        id="<text@example.com>",
        language="en",
    )


@pytest.fixture
def html_part() -> Part:
    """HTML part with description and location."""
    return Part(
        content="<p>Hello, <b>world</b>.</p>",
        type="text/html",
        encoding="7bit",
        description="HTML version",
        location="http://example.com/body.html",
    )


@pytest.fixture
def attachment_part() -> Part:
    """Binary attachment encoded as base64."""
    return Part(
        content=bytes(range(100)),
        type="application/octet-stream",
        encoding="base64",
        disposition='attachment; filename="data.bin"',
    )


@pytest.fixture
def sample_parts(text_part, html_part, attachment_part) -> List[Part]:
    """Three heterogeneous parts in a fixed order."""
    return [text_part, html_part, attachment_part]


@pytest.fixture
def two_parts_lf() -> str:
    return SAMPLE_MESSAGES["two_parts_lf"]


@pytest.fixture
def two_parts_crlf() -> str:
    return SAMPLE_MESSAGES["two_parts_crlf"]


@pytest.fixture
def tmp_body_file(tmp_path) -> Generator[str, None, None]:
    """
    Create temporary multipart body file for CLI tests.

    Args:
        tmp_path: pytest's temporary directory fixture

    Yields:
        Path to temporary body file
    """
    body_path = tmp_path / "body.txt"
    body_path.write_text(SAMPLE_MESSAGES["two_parts_lf"], encoding="utf-8")
    yield str(body_path)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (CLI, end-to-end)"
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """
    Restore structlog defaults after each test.

    CLI tests configure structlog against captured streams that pytest
    closes afterwards.
    """
    yield
    structlog.reset_defaults()
