"""FastAPI dependencies shared by the route modules."""

from fastapi import Request

from phonebook.services.phonebook import PhonebookService


def get_phonebook_service(request: Request) -> PhonebookService:
    """The service built in the lifespan; overridden in tests."""
    service = getattr(request.app.state, "phonebook", None)
    if service is None:
        raise RuntimeError("Phonebook service not initialized")
    return service
