"""fieldfmt — render readable labels from loosely structured records.

Compose a :class:`Template` from fields, constants, and first-match
fallbacks, then evaluate it against a context mapping::

    author = Template(
        Constant("Author:"),
        FirstMatch(Field("preferred_name"), Field("legal_name").required()),
        Field("email").formatter(lambda v: f"<{v}>"),
    )
    author.evaluate({"legal_name": "John Smith"})  # "Author: John Smith"
"""

from __future__ import annotations

from fieldfmt.domain.context import as_context
from fieldfmt.domain.errors import EvaluationError, MissingRequiredFieldError, TemplateError
from fieldfmt.domain.evaluators import Constant, Evaluator, Field, FirstMatch, Template
from fieldfmt.domain.formatters import Array, Const, Stringer, value
from fieldfmt.services.render import render_template
from fieldfmt.services.result import RenderError, RenderResult

__version__ = "0.1.0"

__all__ = [
    "Array",
    "Const",
    "Constant",
    "EvaluationError",
    "Evaluator",
    "Field",
    "FirstMatch",
    "MissingRequiredFieldError",
    "RenderError",
    "RenderResult",
    "Stringer",
    "Template",
    "TemplateError",
    "__version__",
    "as_context",
    "render_template",
    "value",
]
