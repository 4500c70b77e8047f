"""tests/conftest.py"""

import pytest

from archeaders import Headers

BLOCK = "My_Test: header\nAbCd: Test"


@pytest.fixture
def block() -> str:
    """Two-header block with mixed-case names."""
    return BLOCK


@pytest.fixture
def headers() -> Headers:
    """Headers parsed from the two-header block."""
    return Headers(BLOCK)
