"""Shared pytest fixtures for the namesplit test suite."""

from __future__ import annotations

import pytest


@pytest.fixture
def pasted_form_text() -> str:
    """Provide a mixed-script paste with labels, IDs, markers, and companies."""

    return (
        "NRIC or UEN (for Tax Exemption purposes):\r\n"
        "1) john tan 2) MARY LIM, s1234567a / 故：李成兴 王小明、abc pte ltd; "
        "Name#4: sm lee (sm)\r\n"
    )
