"""Declarative field constraints and the validation engine.

A :class:`Constraint` pairs one scalar value with up to five optional rules.
The value is a two-variant tagged scalar: :class:`TextValue` or
:class:`NumberValue`. Length rules only apply to text, range rules only to
numbers; a rule aimed at the other variant is treated as satisfied.

``validate()`` is pure: no state, no side effects, no exceptions.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator


class TextValue(BaseModel):
    """Text variant of a constrained value."""

    model_config = {"frozen": True}

    kind: Literal["text"] = "text"
    text: str

    def __str__(self) -> str:
        return self.text


class NumberValue(BaseModel):
    """Numeric variant of a constrained value."""

    model_config = {"frozen": True}

    kind: Literal["number"] = "number"
    number: int | float

    def __str__(self) -> str:
        return str(self.number)


ScalarValue = Annotated[TextValue | NumberValue, Field(discriminator="kind")]


def as_value(raw: Any) -> TextValue | NumberValue:
    """Wrap a bare ``str``/``int``/``float`` into its tagged variant.

    Already-tagged values pass through unchanged.
    """
    if isinstance(raw, (TextValue, NumberValue)):
        return raw
    if isinstance(raw, bool):
        raise TypeError("bool is not a constrained scalar")
    if isinstance(raw, str):
        return TextValue(text=raw)
    if isinstance(raw, (int, float)):
        return NumberValue(number=raw)
    raise TypeError(f"Unsupported constrained value: {type(raw).__name__}")


class Constraint(BaseModel):
    """One value plus the rules it must satisfy.

    Attributes:
        value: The tagged scalar under test. Bare ``str``/``int``/``float``
            inputs are wrapped automatically.
        required: Stringified, trimmed value must be non-empty.
        min_length: Minimum trimmed length (text only).
        max_length: Maximum trimmed length (text only).
        min: Inclusive lower bound (numbers only).
        max: Inclusive upper bound (numbers only).
    """

    model_config = {"frozen": True}

    value: ScalarValue
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    min: float | None = None
    max: float | None = None

    @field_validator("value", mode="before")
    @classmethod
    def _wrap_raw_scalar(cls, raw: Any) -> Any:
        if isinstance(raw, (str, int, float)):
            return as_value(raw)
        return raw


def validate(descriptor: Constraint) -> bool:
    """Return True when *descriptor*'s value satisfies every rule it sets."""
    is_valid = True

    if descriptor.required:
        is_valid = is_valid and len(str(descriptor.value).strip()) != 0

    match descriptor.value:
        case TextValue(text=text):
            length = len(text.strip())
            if descriptor.min_length is not None:
                is_valid = is_valid and length >= descriptor.min_length
            if descriptor.max_length is not None:
                is_valid = is_valid and length <= descriptor.max_length
        case NumberValue(number=number):
            if descriptor.min is not None:
                is_valid = is_valid and number >= descriptor.min
            if descriptor.max is not None:
                is_valid = is_valid and number <= descriptor.max

    return is_valid
