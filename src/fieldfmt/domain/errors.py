"""Evaluation errors.

A single failure kind originates in the domain: a required field that
cannot be resolved. Composite evaluators re-raise it wrapped in an
:class:`EvaluationError` naming the child position, chained via
``raise ... from`` so the original error stays reachable.
"""

from __future__ import annotations


class TemplateError(Exception):
    """Base class for every template evaluation failure."""


class MissingRequiredFieldError(TemplateError):
    """A required field is absent (or None) and has no default value."""

    def __init__(self, field_id: str) -> None:
        self.field_id = field_id
        super().__init__(f"context missing required field {field_id!r}")


class EvaluationError(TemplateError):
    """A child evaluator failed inside a composite evaluator.

    Attributes:
        index: Position of the failing child within its parent.
        evaluator_repr: ``repr()`` of the failing child.
    """

    def __init__(self, index: int, evaluator_repr: str, cause: TemplateError) -> None:
        self.index = index
        self.evaluator_repr = evaluator_repr
        super().__init__(f"error evaluating field {index} ({evaluator_repr}): {cause}")

    @property
    def root_cause(self) -> TemplateError:
        """Innermost TemplateError in the ``__cause__`` chain."""
        err: TemplateError = self
        while isinstance(err.__cause__, TemplateError):
            err = err.__cause__
        return err

    @property
    def path(self) -> list[int]:
        """Child indices from the outermost composite down to the failure."""
        indices: list[int] = []
        err: BaseException | None = self
        while isinstance(err, EvaluationError):
            indices.append(err.index)
            err = err.__cause__
        return indices

    @property
    def field_id(self) -> str | None:
        root = self.root_cause
        if isinstance(root, MissingRequiredFieldError):
            return root.field_id
        return None
