"""Info page — HTML summary with the record count and the server time."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from phonebook.api.dependencies import get_phonebook_service
from phonebook.services.phonebook import PhonebookService

router = APIRouter(tags=["info"])


def render_info(count: int, now: datetime) -> str:
    return (
        f"<p>Phonebook has info for {count} people.</p>\n"
        f"<p>{now.strftime('%a %b %d %Y %H:%M:%S GMT%z')}</p>\n"
    )


@router.get("/info", response_class=HTMLResponse)
async def info(
    phonebook: PhonebookService = Depends(get_phonebook_service),
):
    count = await phonebook.count()
    return HTMLResponse(render_info(count, datetime.now(timezone.utc)))
