from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from inq_admin_svc.schemas.layout import ContactsView, LayoutResponse
from inq_admin_svc.services.session import SessionContext
from inq_admin_svc.services.stats import fetch_contact_stats
from inq_admin_svc.utils.api_client import InquiryApiClient
from inq_admin_svc.routers.auth import get_api_client, require_authenticated
from inq_admin_svc.routers.layout import render_in_layout

logger = logging.getLogger(__name__)

contacts_router = APIRouter()


@contacts_router.get("/contacts", response_model=LayoutResponse)
async def contacts(
    api_client: InquiryApiClient = Depends(get_api_client),
    session: SessionContext = Depends(require_authenticated),
) -> LayoutResponse:
    """Contact summary panel; ``stats`` is null when the API call failed."""
    stats = await fetch_contact_stats(api_client, session)
    return render_in_layout(ContactsView(stats=stats), title="Contacts")
