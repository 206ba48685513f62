"""Evaluator ABC and the four template building blocks.

A template is a tree of evaluators walked depth-first, left to right.
Every node turns a context mapping into a string; an empty string means
"nothing to show" and is dropped or skipped by the composites.

INVARIANT: Evaluators are frozen. ``Field`` builder methods return a new
instance, so a template cannot change once it has been shared.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import BaseModel

from fieldfmt.domain.context import as_context
from fieldfmt.domain.errors import EvaluationError, MissingRequiredFieldError, TemplateError
from fieldfmt.domain.formatters import Stringer, value

logger = logging.getLogger(__name__)

ContextLike = Mapping[str, Any] | BaseModel | None


class Evaluator(ABC):
    """Anything that renders a context to a string.

    Implementations return ``""`` when their value is absent, and raise
    :class:`TemplateError` only when a required value cannot be resolved.
    They must never mutate the context.
    """

    @abstractmethod
    def evaluate(self, context: ContextLike) -> str:
        """Render *context* to a string (possibly empty)."""
        ...

    def __call__(self, context: ContextLike) -> str:
        return self.evaluate(context)


def _check_evaluators(evaluators: tuple[Any, ...]) -> tuple[Evaluator, ...]:
    for i, child in enumerate(evaluators):
        if not isinstance(child, Evaluator):
            msg = f"argument {i} is not an Evaluator: {child!r}"
            raise TypeError(msg)
    return evaluators


@dataclass(frozen=True)
class Field(Evaluator):
    """A single named value looked up in the context.

    Optional by default, with no default value and :func:`value` as its
    stringer. Use the builder methods to derive configured copies::

        Field("email").required().formatter(lambda v: f"<{v}>")
    """

    key: str
    is_required: bool = False
    default_value: Any = None
    stringer: Stringer = field(default=value, repr=False)

    def required(self) -> Field:
        """Return a copy that fails evaluation when no value resolves."""
        return replace(self, is_required=True)

    def default(self, v: Any) -> Field:
        """Return a copy that substitutes *v* for an absent or None value."""
        return replace(self, default_value=v)

    def formatter(self, fn: Stringer) -> Field:
        """Return a copy that formats resolved values with *fn*."""
        if not callable(fn):
            msg = f"formatter must be callable, got {type(fn).__name__}"
            raise TypeError(msg)
        return replace(self, stringer=fn)

    def evaluate(self, context: ContextLike) -> str:
        v = as_context(context).get(self.key)
        if v is None:
            v = self.default_value
        if v is None:
            if self.is_required:
                raise MissingRequiredFieldError(self.key)
            return ""
        return self.stringer(v)


@dataclass(frozen=True)
class Constant(Evaluator):
    """Fixed text such as a label or punctuation. Ignores the context."""

    text: str

    def evaluate(self, context: ContextLike) -> str:
        return self.text


@dataclass(frozen=True, init=False)
class FirstMatch(Evaluator):
    """Return the first non-empty result among alternatives.

    Children are evaluated in order and evaluation stops at the first
    non-empty string. A child error stops evaluation too: it is re-raised
    with the child's index even if a later child could have matched.
    """

    evaluators: tuple[Evaluator, ...]

    def __init__(self, *evaluators: Evaluator) -> None:
        object.__setattr__(self, "evaluators", _check_evaluators(evaluators))

    def evaluate(self, context: ContextLike) -> str:
        ctx = as_context(context)
        for i, child in enumerate(self.evaluators):
            try:
                s = child.evaluate(ctx)
            except TemplateError as exc:
                raise EvaluationError(i, repr(child), exc) from exc
            if s:
                return s
        return ""


@dataclass(frozen=True, init=False)
class Template(Evaluator):
    """Ordered evaluators whose non-empty results are joined by a space.

    Absent values are dropped rather than left as gaps, so the output
    never has leading, trailing, or doubled spaces from missing fields.
    Any child error aborts the whole render; there is no partial output.
    """

    evaluators: tuple[Evaluator, ...]

    def __init__(self, *evaluators: Evaluator) -> None:
        object.__setattr__(self, "evaluators", _check_evaluators(evaluators))

    def evaluate(self, context: ContextLike) -> str:
        ctx = as_context(context)
        parts: list[str] = []
        for i, child in enumerate(self.evaluators):
            try:
                s = child.evaluate(ctx)
            except TemplateError as exc:
                logger.debug("Template child %d failed: %r", i, child)
                raise EvaluationError(i, repr(child), exc) from exc
            if s:
                parts.append(s)
        return " ".join(parts)
