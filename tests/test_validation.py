from __future__ import annotations

from models.phone_input import NumericForm, StringForm, phone_input_from
from services import validation
from services.clock import FixedClock


def test_phone_input_from_lifts_raw_values():
    assert phone_input_from("+44444444444") == StringForm("+44444444444")
    assert phone_input_from(912345678) == NumericForm(912345678)
    assert phone_input_from(NumericForm(1)) == NumericForm(1)
    assert phone_input_from(False) is None
    assert phone_input_from(1.5) is None


def test_normalize_phone_dispatches_per_variant():
    assert validation.normalize_phone(StringForm("+44444444444")) == "+44444444444"
    assert validation.normalize_phone(NumericForm(validation.PHONE_NUMBER_MIN)) == "0100000000"
    assert validation.normalize_phone(NumericForm(validation.PHONE_NUMBER_MAX + 1)) is None
    assert validation.normalize_phone(StringForm("")) is None
    assert validation.normalize_phone(None) is None


def test_normalize_phone_tolerates_mistyped_variants():
    assert validation.normalize_phone(StringForm(12345678901)) is None  # type: ignore[arg-type]
    assert validation.normalize_phone(NumericForm("123456789")) is None  # type: ignore[arg-type]


def test_email_match_is_a_search():
    # An email-shaped substring is enough
    assert validation.validate_email("mail me at ngoc@ngoc.ngoc today")
    assert not validation.validate_email("ngoc at ngoc dot ngoc")


def test_email_word_characters_are_ascii():
    assert not validation.validate_email("ñ@ñ.ñ")


def test_calculate_age_uses_clock():
    assert validation.calculate_age(1990, FixedClock(2026)) == 36
    assert validation.calculate_age(2026, FixedClock(2026)) == 0


def test_birthday_year_boundary():
    assert validation.validate_birthday_year(validation.MINIMUM_YEAR)
    assert not validation.validate_birthday_year(validation.MINIMUM_YEAR - 1)


def test_email_search_on_long_word_runs_is_fast():
    import time

    start = time.perf_counter()
    assert not validation.validate_email("a" * 200000)
    assert not validation.validate_email("a" * 100000 + "@" + "b" * 100000)
    assert time.perf_counter() - start < 2.0


def test_email_match_found_after_leading_word_characters():
    assert validation.validate_email("xxngoc@ngoc.ngoc")
    assert validation.validate_email("-ngoc@ngoc.ngoc")
