"""Fixtures for UI tests."""

import pytest

from kanbanprobe.document import parse_document


@pytest.fixture
def document(sample_text):
    """Todo (1 incomplete), Doing (1 incomplete, 1 complete), Done (1 complete)."""
    return parse_document(sample_text)
