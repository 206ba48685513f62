"""Tests for render_template."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from fieldfmt.domain.errors import TemplateError
from fieldfmt.domain.evaluators import Evaluator, Field, Template
from fieldfmt.services.render import EVALUATION_FAILED, MISSING_REQUIRED_FIELD, render_template


class Broken(Evaluator):
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def evaluate(self, context: Any) -> str:
        raise self.exc


class TestRenderTemplate:
    def test_success(self, author: Template) -> None:
        result = render_template(author, {"legal_name": "John Smith"}, op="author_label")
        assert result.ok is True
        assert result.op == "author_label"
        assert result.text == "Author: John Smith"
        assert result.error is None

    def test_default_op(self, author: Template) -> None:
        assert render_template(author, {"legal_name": "x"}).op == "render"

    def test_missing_required(self, author: Template) -> None:
        result = render_template(author, {})
        assert result.ok is False
        assert result.text == ""
        assert result.error is not None
        assert result.error.code == MISSING_REQUIRED_FIELD
        assert result.error.detail == {"field": "legal_name", "path": [1, 1]}
        assert "legal_name" in result.error.message

    def test_bare_field(self) -> None:
        result = render_template(Field("a").required(), None)
        assert result.error is not None
        assert result.error.code == MISSING_REQUIRED_FIELD
        assert result.error.detail == {"field": "a"}

    def test_other_template_error(self) -> None:
        result = render_template(Template(Broken(TemplateError("boom"))), {})
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == EVALUATION_FAILED
        assert result.error.detail == {"path": [0]}

    def test_non_template_errors_propagate(self) -> None:
        with pytest.raises(ZeroDivisionError):
            render_template(Template(Broken(ZeroDivisionError())), {})

    def test_bad_context_propagates(self, author: Template) -> None:
        with pytest.raises(TypeError):
            render_template(author, "not a mapping")  # type: ignore[arg-type]

    def test_failure_logged_at_debug(
        self, author: Template, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="fieldfmt"):
            render_template(author, {}, op="author_label")
        messages = [r.getMessage() for r in caplog.records]
        assert "Render author_label failed: MISSING_REQUIRED_FIELD" in messages
        assert any(m.startswith("Template child 1 failed") for m in messages)
