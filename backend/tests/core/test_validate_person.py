"""Person Validation — id shape, name and number rules, pure, no IO.

Tests:
    - ObjectId hex strings accepted; wrong length/charset/types rejected
    - Name: required, at least 3 chars
    - Number: required, \\d{2,3}-\\d+ and at least 8 chars
    - Messages identify the field
"""

import pytest
from bson import ObjectId

from phonebook.core.domain_types import PersonField
from phonebook.core.errors import InvalidIdError, PersonValidationError
from phonebook.core.validate_person import (
    check_name, check_number, check_person_id, is_valid_number,
    is_valid_person_id, validate_person,
)


# --- Identifier shape -----------------------------------------------------------

def test_generated_object_id_is_valid():
    assert is_valid_person_id(str(ObjectId()))


@pytest.mark.parametrize("candidate", [
    "",
    "123",
    "5f1d7a3e9b1e8a3f4c2d1b0",      # 23 chars
    "5f1d7a3e9b1e8a3f4c2d1b0a1",    # 25 chars
    "zzzzzzzzzzzzzzzzzzzzzzzz",     # 24 chars, not hex
    "not-an-id",
    None,
    12345,
])
def test_malformed_ids_rejected(candidate):
    assert not is_valid_person_id(candidate)


def test_twelve_char_string_is_not_an_id():
    # bson accepts 12 raw bytes, but a 12-char str is never an id here
    assert not is_valid_person_id("abcdefghijkl")


def test_check_person_id_returns_the_id():
    oid = str(ObjectId())
    assert check_person_id(oid) == oid


def test_check_person_id_raises_malformatted_id():
    with pytest.raises(InvalidIdError) as exc_info:
        check_person_id("123")
    assert exc_info.value.http_status == 400
    assert exc_info.value.to_response() == {"error": "Malformatted ID"}


# --- Name -------------------------------------------------------------------------

@pytest.mark.parametrize("name", [None, ""])
def test_name_is_required(name):
    with pytest.raises(PersonValidationError, match="Name is required") as exc_info:
        check_name(name)
    assert exc_info.value.field == PersonField.NAME


@pytest.mark.parametrize("name", ["A", "Al"])
def test_short_name_rejected(name):
    with pytest.raises(PersonValidationError, match="at least 3 characters"):
        check_name(name)


def test_three_char_name_accepted():
    assert check_name("Ada") == "Ada"


# --- Number -----------------------------------------------------------------------

@pytest.mark.parametrize("number", [
    "09-1234556", "040-22334455", "12-345678",
    "09-12345",         # exactly 8 chars
])
def test_valid_numbers(number):
    assert is_valid_number(number)
    assert check_number(number) == number


@pytest.mark.parametrize("number", [
    "1234556",          # no dash
    "0-12345678",       # one-digit prefix
    "0401-2233445",     # four-digit prefix
    "09-123",           # too short
    "09-1234",          # 7 chars, one under the minimum
    "040-12a4567",      # letters
    "09-1234556-7",     # two dashes
    "09-1234556\n",     # trailing newline
    "+358-1234567",
])
def test_invalid_numbers(number):
    assert not is_valid_number(number)
    with pytest.raises(PersonValidationError, match="not a valid phone number") as exc_info:
        check_number(number)
    assert exc_info.value.field == PersonField.NUMBER


def test_non_ascii_digits_rejected():
    assert not is_valid_number("٠٩-١٢٣٤٥٦٧")


@pytest.mark.parametrize("number", [None, ""])
def test_number_is_required(number):
    with pytest.raises(PersonValidationError, match="Phone number is required"):
        check_number(number)


def test_invalid_number_message_shows_format():
    with pytest.raises(PersonValidationError) as exc_info:
        check_number("12345")
    assert exc_info.value.message == (
        "12345 is not a valid phone number! "
        "Must be in the format XX-XXXXXXX or XXX-XXXXXXXX."
    )


# --- Both fields ------------------------------------------------------------------

def test_validate_person_returns_both_fields():
    assert validate_person("Ada Lovelace", "09-12345678") == (
        "Ada Lovelace", "09-12345678",
    )


def test_validate_person_checks_name_first():
    with pytest.raises(PersonValidationError) as exc_info:
        validate_person("A", "bad")
    assert exc_info.value.field == PersonField.NAME
