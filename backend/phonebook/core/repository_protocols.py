"""Boundary Protocols — contract between the phonebook service and its store.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Repositories return raw stored documents ({"_id", "name", "number"});
      turning them into the public Person shape is the service's job
    - Ids passed in have already been shape-checked by the caller

Design Decisions:
    - Protocol over ABC: structural subtyping, so test doubles need no base class
    - Async in Protocol: implementations do network IO
"""

from typing import Any, Protocol

from phonebook.core.domain_types import PersonId

PersonDocument = dict[str, Any]


class PersonRepository(Protocol):
    """Contract for Person persistence — implemented by infrastructure."""
    async def list_all(self) -> list[PersonDocument]: ...
    async def get_by_id(self, person_id: PersonId) -> PersonDocument | None: ...
    async def find_by_name(self, name: str) -> PersonDocument | None: ...
    async def insert(self, name: str, number: str) -> PersonDocument: ...
    async def update_number(
        self, person_id: PersonId, number: str,
    ) -> PersonDocument | None: ...
    async def delete_by_id(self, person_id: PersonId) -> bool: ...
    async def count(self) -> int: ...
    async def ping(self) -> bool: ...
