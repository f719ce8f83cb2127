"""Persons — CRUD endpoints for /api/persons.

Invariants:
    - Every handler is validate → one service call → serialize; errors propagate
      to api/error_handlers.py untouched
    - Responses are PersonResponse only (id as hex string, no _id/__v)
    - DELETE answers 204 with an empty body
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from phonebook.api.dependencies import get_phonebook_service
from phonebook.schemas.person import PersonCreate, PersonResponse, PersonUpdate
from phonebook.services.phonebook import PhonebookService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/persons", tags=["persons"])


@router.get("", response_model=list[PersonResponse])
async def list_persons(
    phonebook: PhonebookService = Depends(get_phonebook_service),
):
    """All persons, storage order, no pagination."""
    return await phonebook.list_all()


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: str,
    phonebook: PhonebookService = Depends(get_phonebook_service),
):
    return await phonebook.get_by_id(person_id)


@router.post(
    "", response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_person(
    body: PersonCreate,
    phonebook: PhonebookService = Depends(get_phonebook_service),
):
    """Create a person. Name must be unique."""
    return await phonebook.create(body.name, body.number)


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: str,
    body: PersonUpdate,
    phonebook: PhonebookService = Depends(get_phonebook_service),
):
    """Replace the number of an existing person. The name never changes."""
    return await phonebook.update_number(person_id, body.number)


@router.delete(
    "/{person_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_person(
    person_id: str,
    phonebook: PhonebookService = Depends(get_phonebook_service),
):
    await phonebook.delete_by_id(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
