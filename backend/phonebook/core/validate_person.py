"""Person Validation — pure checks for identifiers and Person payloads.

Invariants:
    - Every check runs before any repository call
    - Failures raise InvalidIdError / PersonValidationError, never return sentinels
    - Messages name the offending field and the expected format

Design Decisions:
    - bson.ObjectId.is_valid for the id shape: same rule the driver applies
    - fullmatch over ^...$: "$" would accept a trailing newline
"""

from bson import ObjectId

from phonebook.core.domain_types import (
    NAME_MIN_LENGTH, NUMBER_MIN_LENGTH, NUMBER_PATTERN, PersonField, PersonId,
)
from phonebook.core.errors import InvalidIdError, PersonValidationError


def is_valid_person_id(candidate: object) -> bool:
    """True iff candidate is the 24-char hex form of an ObjectId."""
    return isinstance(candidate, str) and ObjectId.is_valid(candidate)


def check_person_id(candidate: object) -> PersonId:
    if not is_valid_person_id(candidate):
        raise InvalidIdError(candidate)
    return PersonId(candidate)


def is_valid_number(number: str) -> bool:
    return (
        NUMBER_PATTERN.fullmatch(number) is not None
        and len(number) >= NUMBER_MIN_LENGTH
    )


def check_name(name: str | None) -> str:
    if not name:
        raise PersonValidationError("Name is required", PersonField.NAME)
    if len(name) < NAME_MIN_LENGTH:
        raise PersonValidationError(
            f"Name must be at least {NAME_MIN_LENGTH} characters long",
            PersonField.NAME,
        )
    return name


def check_number(number: str | None) -> str:
    if not number:
        raise PersonValidationError("Phone number is required", PersonField.NUMBER)
    if not is_valid_number(number):
        raise PersonValidationError(
            f"{number} is not a valid phone number! "
            "Must be in the format XX-XXXXXXX or XXX-XXXXXXXX.",
            PersonField.NUMBER,
        )
    return number


def validate_person(name: str | None, number: str | None) -> tuple[str, str]:
    """Validate both fields of a new Person. Name is checked first."""
    return check_name(name), check_number(number)
