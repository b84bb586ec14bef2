from __future__ import annotations

import re
import unicodedata
from typing import Any, Optional

from models.phone_input import NumericForm, PhoneInput, StringForm
from ports.clock import ClockPort


MINIMUM_YEAR = 1900

# Word characters are ASCII-only; the match is a search, not anchored.
# Matches start at a word boundary so the search stays linear.
EMAIL_PATTERN = re.compile(r"(?<!\w)\w+([-+.']\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*", re.ASCII)

PHONE_TEXT_MIN_LEN = 11
PHONE_TEXT_MAX_LEN = 12
PHONE_NUMBER_MIN = 100000000
PHONE_NUMBER_MAX = 9999999999


def validate_name(value: Any) -> bool:
    """First character must be an uppercase letter (Unicode category Lu)."""
    if not value or not isinstance(value, str):
        return False
    return unicodedata.category(value[0]) == "Lu"


def validate_birthday_year(value: Any) -> bool:
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return value >= MINIMUM_YEAR


def calculate_age(birthday_year: int, clock: ClockPort) -> int:
    return clock.current_year() - birthday_year


def validate_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.search(value) is not None


def normalize_phone(phone: Optional[PhoneInput]) -> Optional[str]:
    """Return the stored form of a phone input, or None when it is invalid.

    StringForm is kept verbatim when it starts with '+' and has 11-12 characters.
    NumericForm within [PHONE_NUMBER_MIN, PHONE_NUMBER_MAX] gains a leading '0'.
    """
    if isinstance(phone, StringForm):
        text = phone.text
        if not isinstance(text, str) or not text.startswith("+"):
            return None
        if len(text) < PHONE_TEXT_MIN_LEN or len(text) > PHONE_TEXT_MAX_LEN:
            return None
        return text
    if isinstance(phone, NumericForm):
        if not isinstance(phone.number, int) or isinstance(phone.number, bool):
            return None
        if phone.number < PHONE_NUMBER_MIN or phone.number > PHONE_NUMBER_MAX:
            return None
        return f"0{phone.number}"
    return None
