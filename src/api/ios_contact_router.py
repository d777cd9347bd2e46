"""
iOS Shortcut endpoints.

POST /ios-contact receives the array the Shortcut exports; only its first
contact is synced into Notion.
"""

from typing import Annotated, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.dependencies import get_config, get_store
from src.contacts.models import ContactPayload
from src.contacts.upsert import upsert_contact
from src.integrations.contracts.notion import NotionStore
from src.utils.config_loader import AppConfig

router = APIRouter()


@router.get("/public", response_class=PlainTextResponse, tags=["Public"])
async def public():
    return "Hello World"


@router.post("/ios-contact", tags=["Contacts"])
async def ios_contact(
    contacts: Annotated[List[ContactPayload], Body(min_length=1)],
    config: AppConfig = Depends(get_config),
    store: NotionStore = Depends(get_store),
):
    """
    Create or update the Notion contact page matching the first contact's
    last and first name.
    """
    result = await upsert_contact(store, config, contacts[0])
    return JSONResponse(status_code=result.status_code, content=result.to_response())
