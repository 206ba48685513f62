"""Tests for context normalisation."""

from __future__ import annotations

from types import MappingProxyType

import pytest
from pydantic import BaseModel, Field as PydField

from fieldfmt.domain.context import as_context
from fieldfmt.domain.evaluators import Field, Template
from fieldfmt.domain.formatters import Array


class Person(BaseModel):
    model_config = {"frozen": True}

    legal_name: str
    preferred_name: str | None = None
    tags: list[str] = PydField(default_factory=list)


class TestAsContext:
    def test_none_is_empty(self) -> None:
        assert as_context(None) == {}

    def test_mapping_returned_as_is(self) -> None:
        ctx = {"a": 1}
        assert as_context(ctx) is ctx

    def test_read_only_mapping(self) -> None:
        ctx = MappingProxyType({"a": "foo"})
        assert Field("a").evaluate(ctx) == "foo"

    def test_pydantic_model_dumped(self) -> None:
        ctx = as_context(Person(legal_name="John Smith"))
        assert ctx["legal_name"] == "John Smith"
        assert ctx["preferred_name"] is None

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="list"):
            as_context(["a", "b"])  # type: ignore[arg-type]


class TestModelContext:
    def test_template_over_model(self) -> None:
        t = Template(Field("preferred_name"), Field("legal_name"), Field("tags").formatter(Array(",")))
        person = Person(legal_name="John Smith", tags=["a", "b"])
        assert t.evaluate(person) == "John Smith a,b"
