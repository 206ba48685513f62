"""Shared pytest fixtures for fieldfmt tests."""

from __future__ import annotations

from typing import Any

import pytest

from fieldfmt.domain.evaluators import Constant, Field, FirstMatch, Template


def angle_brackets(v: object) -> str:
    return f"<{v}>"


@pytest.fixture
def author() -> Template:
    """``Author: <preferred or legal name> <email>`` label template."""
    return Template(
        Constant("Author:"),
        FirstMatch(Field("preferred_name"), Field("legal_name").required()),
        Field("email").formatter(angle_brackets),
    )


@pytest.fixture
def author_context() -> dict[str, Any]:
    """A fully populated person record."""
    return {
        "legal_name": "John Smith",
        "preferred_name": "Johnny Apple",
        "email": "john-smith@example.com",
    }
