"""Request and response value types for the helloworld model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr

__all__ = [
    "NAMESPACE",
    "GREETING_PREFIX",
    "MY_RESPONSE_CLASS",
    "MyRequest",
    "MyResponse",
    "qualified_name",
]

NAMESPACE = "org.accordproject.helloworld"

GREETING_PREFIX = "Hello Fred Blogs "


def qualified_name(namespace: str, type_name: str) -> str:
    """Return the fully qualified model type name, e.g. ``org.example.Thing``."""
    return f"{namespace}.{type_name}"


MY_RESPONSE_CLASS = qualified_name(NAMESPACE, "MyResponse")


class MyRequest(BaseModel):
    """Request object read from the request JSON file.

    Unknown fields are accepted and dropped.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    input: StrictStr

    @classmethod
    def type_name(cls) -> str:
        return qualified_name(NAMESPACE, cls.__name__)


class MyResponse(BaseModel):
    """Response object; ``class_`` is serialized under the ``class`` key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_: Literal["org.accordproject.helloworld.MyResponse"] = Field(
        default=MY_RESPONSE_CLASS, alias="class"
    )
    output: str

    @classmethod
    def type_name(cls) -> str:
        return qualified_name(NAMESPACE, cls.__name__)
