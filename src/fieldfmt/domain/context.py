"""Context normalisation — what a template is evaluated against."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

Context = Mapping[str, Any]


def as_context(source: Mapping[str, Any] | BaseModel | None) -> Context:
    """Return a read-only view of *source* usable as an evaluation context.

    ``None`` is an empty context. Pydantic models are dumped to a dict so
    frontmatter-style records can be rendered directly.

    Examples:
        >>> as_context(None)
        {}
        >>> as_context({"a": 1})["a"]
        1
    """
    if source is None:
        return {}
    if isinstance(source, BaseModel):
        return source.model_dump()
    if isinstance(source, Mapping):
        return source
    msg = f"context must be a mapping, pydantic model, or None, got {type(source).__name__}"
    raise TypeError(msg)
