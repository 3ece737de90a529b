from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query

from inq_admin_svc.models.enums import STATUS_ALL, STATUS_FILTER_OPTIONS
from inq_admin_svc.schemas.inquiry import InquiryStatusUpdate
from inq_admin_svc.schemas.layout import DashboardView, LayoutResponse
from inq_admin_svc.services.inquiry_sync import InquiryListSynchronizer
from inq_admin_svc.services.session import SessionContext
from inq_admin_svc.utils.api_client import InquiryApiClient
from inq_admin_svc.utils.formatting import inquiry_row
from inq_admin_svc.routers.auth import get_api_client, require_authenticated
from inq_admin_svc.routers.layout import render_in_layout

logger = logging.getLogger(__name__)

dashboard_router = APIRouter()

StatusFilter = Literal["all", "pending", "approved", "rejected"]


def get_synchronizer(
    api_client: InquiryApiClient = Depends(get_api_client),
    session: SessionContext = Depends(require_authenticated),
) -> InquiryListSynchronizer:
    # One synchronizer per request: created empty, discarded with the response
    return InquiryListSynchronizer(api_client, session)


def _render(sync: InquiryListSynchronizer, status: str) -> LayoutResponse:
    sync.select_status(status)
    view = DashboardView(
        loading=sync.loading,
        selected_status=sync.selected_status,
        status_options=list(STATUS_FILTER_OPTIONS),
        stats=sync.counts,
        inquiries=[inquiry_row(inquiry) for inquiry in sync.visible],
    )
    return render_in_layout(view)


@dashboard_router.get("/", response_model=LayoutResponse)
async def dashboard(
    status_filter: StatusFilter = Query(STATUS_ALL, alias="status"),
    sync: InquiryListSynchronizer = Depends(get_synchronizer),
) -> LayoutResponse:
    """Inquiry table with status filter and per-status counts."""
    await sync.fetch_all()
    return _render(sync, status_filter)


@dashboard_router.patch("/inquiries/{inquiry_id}", response_model=LayoutResponse)
async def update_inquiry_status(
    inquiry_id: str,
    payload: InquiryStatusUpdate,
    status_filter: StatusFilter = Query(STATUS_ALL, alias="status"),
    sync: InquiryListSynchronizer = Depends(get_synchronizer),
) -> LayoutResponse:
    """Change one inquiry's status. A failed update leaves the view as it was."""
    await sync.fetch_all()
    await sync.update_status(inquiry_id, payload.status)
    return _render(sync, status_filter)


@dashboard_router.delete("/inquiries/{inquiry_id}", response_model=LayoutResponse)
async def delete_inquiry(
    inquiry_id: str,
    confirm: bool = False,
    status_filter: StatusFilter = Query(STATUS_ALL, alias="status"),
    sync: InquiryListSynchronizer = Depends(get_synchronizer),
) -> LayoutResponse:
    """Delete one inquiry; nothing is sent to the API unless ``confirm`` is true."""
    await sync.fetch_all()
    await sync.delete_one(inquiry_id, lambda: confirm)
    return _render(sync, status_filter)
