from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

from models.phone_input import PhoneInput


@runtime_checkable
class PersonRecordPort(Protocol):
    def set_name(self, value: str) -> None:
        ...

    def set_birthday_year(self, value: int) -> None:
        ...

    def set_email(self, value: str) -> None:
        ...

    def set_phone(self, value: Union[str, int, PhoneInput]) -> None:
        ...
