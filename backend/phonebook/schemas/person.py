"""Person Schemas — Pydantic models for the /api/persons boundary.

Invariants:
    - Request bodies only check JSON types; field rules live in core/validate_person.py
      so the same messages come back from the API and the CLI
    - PersonResponse is the only Person shape that leaves the service:
      {"id": str, "name": str, "number": str}, never _id or __v

Design Decisions:
    - Optional fields on PersonCreate/PersonUpdate: a missing field is a domain
      validation failure ("Name is required"), not a schema error
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


class PersonCreate(BaseModel):
    """POST /api/persons body."""
    name: str | None = None
    number: str | None = None


class PersonUpdate(BaseModel):
    """PUT /api/persons/{id} body. Only the number can change."""
    number: str | None = None


class PersonResponse(BaseModel):
    """Public Person representation."""
    id: str
    name: str
    number: str

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "PersonResponse":
        """Build from a stored document; the ObjectId becomes its hex string."""
        return cls(
            id=str(document["_id"]),
            name=document["name"],
            number=document["number"],
        )
