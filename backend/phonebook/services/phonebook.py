"""Phonebook Service — validate, check, persist, one Person at a time.

Invariants:
    - Ids are shape-checked before the repository is called (bad id never reaches the store)
    - Name and number rules run here, before any write, for create and update alike
    - Name uniqueness is find-then-insert; two concurrent creates of the same
      name may both succeed (no storage-level constraint)
    - Only PersonResponse leaves this layer — stored documents never do

Design Decisions:
    - Repository passed in, not looked up: tests swap in an in-memory double
    - Not-found raised here rather than in the repository: the repository stays a
      thin driver wrapper returning None/False
"""

from phonebook.core.errors import DuplicateNameError, PersonNotFoundError
from phonebook.core.repository_protocols import PersonRepository
from phonebook.core.validate_person import (
    check_number, check_person_id, validate_person,
)
from phonebook.schemas.person import PersonResponse


class PhonebookService:
    """CRUD operations over Person records."""

    def __init__(self, repository: PersonRepository):
        self._repository = repository

    async def list_all(self) -> list[PersonResponse]:
        documents = await self._repository.list_all()
        return [PersonResponse.from_document(d) for d in documents]

    async def get_by_id(self, person_id: str) -> PersonResponse:
        pid = check_person_id(person_id)
        document = await self._repository.get_by_id(pid)
        if document is None:
            raise PersonNotFoundError(pid)
        return PersonResponse.from_document(document)

    async def find_by_name(self, name: str) -> PersonResponse | None:
        document = await self._repository.find_by_name(name)
        if document is None:
            return None
        return PersonResponse.from_document(document)

    async def create(
        self, name: str | None, number: str | None,
    ) -> PersonResponse:
        """Validate both fields, reject a taken name, then insert."""
        name, number = validate_person(name, number)
        if await self._repository.find_by_name(name) is not None:
            raise DuplicateNameError(name)
        document = await self._repository.insert(name, number)
        return PersonResponse.from_document(document)

    async def update_number(
        self, person_id: str, number: str | None,
    ) -> PersonResponse:
        pid = check_person_id(person_id)
        number = check_number(number)
        document = await self._repository.update_number(pid, number)
        if document is None:
            raise PersonNotFoundError(pid)
        return PersonResponse.from_document(document)

    async def delete_by_id(self, person_id: str) -> None:
        pid = check_person_id(person_id)
        if not await self._repository.delete_by_id(pid):
            raise PersonNotFoundError(pid)

    async def count(self) -> int:
        return await self._repository.count()

    async def is_ready(self) -> bool:
        return await self._repository.ping()
