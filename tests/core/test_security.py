"""
Tests for core security helpers.
"""
import pytest

from carepass.core.security import mask_email


@pytest.mark.parametrize("email, masked", [
    ("jane@example.com", "j***@example.com"),
    ("j@example.com", "j***@example.com"),
    ("not-an-email", "***"),
    ("", "***"),
])
def test_mask_email(email, masked):
    assert mask_email(email) == masked
