"""RenderResult and RenderError — the caller-facing render contract.

The domain raises; callers that prefer values over exceptions (logging
pipelines, HTTP handlers, batch jobs) use :func:`render_template`, which
always returns a RenderResult.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RenderError(BaseModel):
    """Structured error payload within a RenderResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class RenderResult(BaseModel):
    """Outcome of rendering one template against one context.

    Attributes:
        ok: Whether the render succeeded.
        op: Caller-supplied operation name (e.g. ``"author_label"``).
        text: Rendered string; always ``""`` when ``ok`` is False.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    text: str = ""
    error: RenderError | None = None
