"""Typed payload contracts for the conversion operations.

Payloads are validated before they leave the service layer so shape
regressions (say ``value`` vs ``integer``) fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ConversionData(BaseModel):
    """Payload for ``decode`` and ``encode``."""

    numeral: str
    value: int


class CheckData(BaseModel):
    """Payload for ``check``. ``value`` is None when not canonical."""

    numeral: str
    canonical: bool
    value: int | None = None


class ConvertItem(BaseModel):
    """One successful token in a ``convert`` batch."""

    model_config = ConfigDict(extra="forbid")

    index: int
    input: str
    direction: Literal["decode", "encode"]
    numeral: str
    value: int


class ConvertErrorItem(BaseModel):
    """One failed token in a ``convert`` batch."""

    index: int
    input: str
    code: str
    error: str


class ConvertResultData(BaseModel):
    """Payload for ``convert``."""

    count: int
    items: list[ConvertItem]
    errors: list[ConvertErrorItem]


class TableItem(BaseModel):
    """One row of the symbol table."""

    place: str
    symbol: str
    value: int


class TableResultData(BaseModel):
    """Payload for ``table``."""

    count: int
    items: list[TableItem]
