"""Tests for MyRequest and MyResponse."""

from __future__ import annotations

import pydantic
import pytest

from helloharness.models import (
    GREETING_PREFIX,
    MY_RESPONSE_CLASS,
    NAMESPACE,
    MyRequest,
    MyResponse,
    qualified_name,
)


class TestQualifiedName:
    def test_joins_namespace_and_type(self) -> None:
        assert qualified_name("org.example", "Thing") == "org.example.Thing"

    def test_response_class_tag(self) -> None:
        assert MY_RESPONSE_CLASS == "org.accordproject.helloworld.MyResponse"
        assert MY_RESPONSE_CLASS.startswith(NAMESPACE + ".")

    def test_type_names(self) -> None:
        assert MyRequest.type_name() == "org.accordproject.helloworld.MyRequest"
        assert MyResponse.type_name() == MY_RESPONSE_CLASS


class TestMyRequest:
    def test_input_field(self) -> None:
        assert MyRequest(input="World").input == "World"

    def test_extra_fields_ignored(self) -> None:
        req = MyRequest.model_validate({"input": "x", "other": 1})
        assert req.input == "x"
        assert not hasattr(req, "other")

    def test_non_string_input_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            MyRequest.model_validate({"input": 42})

    def test_missing_input_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            MyRequest.model_validate({})

    def test_frozen(self) -> None:
        req = MyRequest(input="a")
        with pytest.raises(pydantic.ValidationError):
            req.input = "b"  # type: ignore[misc]


class TestMyResponse:
    def test_class_defaults_to_tag(self) -> None:
        resp = MyResponse(output="hi")
        assert resp.class_ == MY_RESPONSE_CLASS

    def test_class_populated_by_alias(self) -> None:
        resp = MyResponse.model_validate({"class": MY_RESPONSE_CLASS, "output": "hi"})
        assert resp.output == "hi"

    def test_other_class_tag_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            MyResponse.model_validate({"class": "org.example.Other", "output": "hi"})

    def test_dump_uses_wire_key(self) -> None:
        dumped = MyResponse(output="hi").model_dump(by_alias=True)
        assert list(dumped) == ["class", "output"]

    def test_greeting_prefix(self) -> None:
        assert GREETING_PREFIX == "Hello Fred Blogs "
