import pytest

from bilete.services.phone import (
    INVALID_PHONE_MESSAGE,
    autocomplete_phone,
    is_valid_phone,
    normalize_phone,
    validation_message,
    whatsapp_number,
)


@pytest.mark.parametrize("raw,expected", [
    ("0712345678", "+40712345678"),
    ("40712345678", "+40712345678"),
    ("712345678", "+40712345678"),
    ("+40712345678", "+40712345678"),
    ("0712 345 678", "+40712345678"),
    ("(0712)-345-678", "+40712345678"),
    ("+40 712 345 678", "+40712345678"),
    ("+0712345678", "+40712345678"),
])
def test_normalize_known_shapes(raw, expected):
    assert normalize_phone(raw) == expected
    assert is_valid_phone(raw)


def test_normalize_empty():
    assert normalize_phone("") == ""
    assert normalize_phone(None) == ""
    assert not is_valid_phone("")


@pytest.mark.parametrize("raw", ["12345", "07123456789", "abc", "0044 7700 900123", "++0712345678"])
def test_normalize_failure_returns_original(raw):
    assert normalize_phone(raw) == raw
    assert not is_valid_phone(raw)


def test_plus40_short_circuit_keeps_cleaned_value():
    # already prefixed: no length rules apply, validity decides
    assert normalize_phone("+40 12") == "+4012"
    assert not is_valid_phone("+40 12")


def test_rules_for_generated_numbers():
    for n in range(0, 1000, 37):
        body = f"7{n:08d}"
        assert normalize_phone("0" + body) == "+40" + body
        assert normalize_phone("40" + body) == "+40" + body
        assert normalize_phone(body) == "+40" + body


def test_nine_digits_with_leading_zero_gets_prefix():
    assert normalize_phone("012345678") == "+40012345678"


@pytest.mark.parametrize("raw", ["0712345678", "40712345678", "712345678", "+40 712-345-678"])
def test_normalize_is_idempotent_for_valid_numbers(raw):
    once = normalize_phone(raw)
    assert is_valid_phone(once)
    assert normalize_phone(once) == once


def test_is_valid_never_raises_on_garbage():
    for raw in ["+", "+++", "\n", "---", "😀"]:
        assert is_valid_phone(raw) is False


def test_autocomplete_only_without_plus():
    assert autocomplete_phone("0712345678") == "+40712345678"
    assert autocomplete_phone("+0712345678") == "+0712345678"
    assert autocomplete_phone("123") == "123"
    assert autocomplete_phone("") == ""


def test_validation_message():
    assert validation_message("0712345678") is None
    assert validation_message("") is None
    assert validation_message("123") == INVALID_PHONE_MESSAGE


@pytest.mark.parametrize("raw,expected", [
    ("0712345678", "40712345678"),
    ("+40712345678", "40712345678"),
    ("0712 34", "4071234"),
    ("12345", "4012345"),
    ("4012", "4012"),
    ("", ""),
    ("n/a", ""),
])
def test_whatsapp_number(raw, expected):
    assert whatsapp_number(raw) == expected
