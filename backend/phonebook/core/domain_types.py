"""Domain Types — rich types and constants for the Person entity.

Invariants:
    - PersonId wraps the 24-char hex form of a MongoDB ObjectId, never the ObjectId itself
    - Name and number constraints live here only (validators and messages read from these)
    - All valid field names encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - re.ASCII on the number pattern: \\d must not accept non-ASCII digits
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", str)


# ─── Constraints ─────────────────────────────────────────────────

NAME_MIN_LENGTH = 3
NUMBER_MIN_LENGTH = 8
NUMBER_PATTERN = re.compile(r"\d{2,3}-\d+", re.ASCII)  # 09-1234556, 040-22334455


# ─── Enums ───────────────────────────────────────────────────────

class PersonField(str, Enum):
    """Fields of a Person that callers may write."""
    NAME = "name"
    NUMBER = "number"
