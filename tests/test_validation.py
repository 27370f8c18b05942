# tests/test_validation.py

import pytest

from caljal.core.errors import CaljalError, InvalidDateError
from caljal.core.types import CalendarDate
from caljal.engines.validation import (
    ConversionResult,
    checked_gregorian_to_jalali,
    checked_jalali_to_gregorian,
    validate_gregorian,
    validate_jalali,
)


def test_valid_inputs_pass_through():
    assert validate_jalali(1403, 12, 30) == CalendarDate(1403, 12, 30)
    assert validate_gregorian(2024, 2, 29) == CalendarDate(2024, 2, 29)

@pytest.mark.parametrize(
    "triple",
    [
        (1404, 12, 30),  # Esfand 30 in a common year
        (1403, 13, 1),
        (1403, 0, 10),
        (1403, 7, 31),
        (1403, 1, 0),
        (1403, 1, -3),
    ],
)
def test_invalid_jalali(triple):
    with pytest.raises(InvalidDateError):
        validate_jalali(*triple)

@pytest.mark.parametrize("triple", [(2023, 2, 29), (1900, 2, 29), (2024, 4, 31), (2024, 12, 32)])
def test_invalid_gregorian(triple):
    with pytest.raises(InvalidDateError):
        validate_gregorian(*triple)

def test_non_int_fields_rejected():
    with pytest.raises(InvalidDateError):
        validate_jalali(1403, "1", 1)
    with pytest.raises(InvalidDateError):
        validate_jalali(1403, True, 1)

def test_error_hierarchy():
    assert issubclass(InvalidDateError, CaljalError)
    # callers that only know about ValueError still catch it
    with pytest.raises(ValueError):
        validate_jalali(1403, 13, 1)

def test_checked_conversions_return_tagged_results():
    ok = checked_jalali_to_gregorian(1403, 1, 1)
    assert ok == ConversionResult(ok=True, value=CalendarDate(2024, 3, 20))
    assert ok.unwrap() == CalendarDate(2024, 3, 20)

    ok = checked_gregorian_to_jalali(2024, 3, 20)
    assert ok.ok and ok.value == CalendarDate(1403, 1, 1)

    bad = checked_jalali_to_gregorian(1404, 12, 30)
    assert bad.ok is False
    assert bad.value is None
    assert "1..29" in bad.error
    with pytest.raises(InvalidDateError):
        bad.unwrap()

    assert checked_gregorian_to_jalali(2024, 13, 1).ok is False
