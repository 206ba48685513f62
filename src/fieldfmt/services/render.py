"""Render a template into a RenderResult instead of raising."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from fieldfmt.domain.errors import EvaluationError, MissingRequiredFieldError, TemplateError
from fieldfmt.domain.evaluators import Evaluator
from fieldfmt.services.result import RenderError, RenderResult

logger = logging.getLogger(__name__)

MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
EVALUATION_FAILED = "EVALUATION_FAILED"


def _error_from(exc: TemplateError) -> RenderError:
    root = exc.root_cause if isinstance(exc, EvaluationError) else exc
    detail: dict[str, Any] = {}
    if isinstance(exc, EvaluationError):
        detail["path"] = exc.path
    if isinstance(root, MissingRequiredFieldError):
        detail["field"] = root.field_id
        return RenderError(code=MISSING_REQUIRED_FIELD, message=str(root), detail=detail)
    return RenderError(code=EVALUATION_FAILED, message=str(exc), detail=detail)


def render_template(
    template: Evaluator,
    context: Mapping[str, Any] | BaseModel | None,
    *,
    op: str = "render",
) -> RenderResult:
    """Evaluate *template* against *context*.

    Template errors become ``ok=False`` results carrying a
    :class:`RenderError`; anything else (a broken formatter, a context of
    the wrong type) propagates.
    """
    try:
        text = template.evaluate(context)
    except TemplateError as exc:
        error = _error_from(exc)
        logger.debug("Render %s failed: %s", op, error.code, exc_info=True)
        return RenderResult(ok=False, op=op, error=error)
    return RenderResult(ok=True, op=op, text=text)
