from __future__ import annotations

import logging
from typing import Any, NoReturn, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr

from models.errors import (
    InvalidBirthdayYear,
    InvalidEmail,
    InvalidName,
    InvalidPhone,
    PersonValidationError,
)
from models.phone_input import PhoneInput, phone_input_from
from ports.clock import ClockPort
from services.clock import SystemClock
from services import validation
from utils.logging_setup import log_field_event


class PersonRecord(BaseModel):
    """In-memory person record.

    Fields start at their zero values and are only filled through the
    ``set_*`` methods, each of which validates its input before assigning.
    A rejected value raises the matching ``PersonValidationError`` subclass
    and leaves the record untouched. ``age`` is derived when the birthday
    year is set and is not recomputed afterwards.
    """

    name: str = ""
    birthday_year: int = 0
    age: int = 0
    email: str = ""
    phone: str = ""

    model_config = ConfigDict(extra="forbid")

    _clock: ClockPort = PrivateAttr(default_factory=SystemClock)

    def __init__(self, clock: ClockPort | None = None) -> None:
        # Always starts empty; fields are only filled through the setters
        super().__init__()
        if clock is not None:
            self._clock = clock

    @property
    def clock(self) -> ClockPort:
        return self._clock

    def set_name(self, value: str) -> None:
        if not validation.validate_name(value):
            self._reject("name", value, InvalidName())
        self.name = value
        self._accepted("name", value)

    def set_birthday_year(self, value: int) -> None:
        if not validation.validate_birthday_year(value):
            self._reject("birthday_year", value, InvalidBirthdayYear())
        self.birthday_year = value
        self.age = validation.calculate_age(value, self._clock)
        self._accepted("birthday_year", value)

    def set_email(self, value: str) -> None:
        if not validation.validate_email(value):
            self._reject("email", value, InvalidEmail())
        self.email = value
        self._accepted("email", value)

    def set_phone(self, value: Union[str, int, PhoneInput]) -> None:
        phone = validation.normalize_phone(phone_input_from(value))
        if phone is None:
            self._reject("phone", value, InvalidPhone())
        self.phone = phone
        self._accepted("phone", phone)

    @staticmethod
    def _accepted(field: str, value: Any) -> None:
        log_field_event(logging.DEBUG, field, value, "ok")

    @staticmethod
    def _reject(field: str, value: Any, err: PersonValidationError) -> NoReturn:
        log_field_event(logging.WARNING, field, value, "rejected", error=str(err))
        raise err
