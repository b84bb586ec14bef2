from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class StringForm:
    """Phone given as text, e.g. '+44444444444'."""

    text: str


@dataclass(frozen=True)
class NumericForm:
    """Phone given as a bare number without the leading zero."""

    number: int


PhoneInput = Union[StringForm, NumericForm]


def phone_input_from(value: Any) -> Optional[PhoneInput]:
    """Lift a raw str/int into a PhoneInput variant.

    Returns None for any other type. bool is rejected even though it is an int.
    """
    if isinstance(value, (StringForm, NumericForm)):
        return value
    if isinstance(value, str):
        return StringForm(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return NumericForm(value)
    return None
