from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from inq_admin_svc.schemas.inquiry import ContactStats, StatusCounts


class NavItem(BaseModel):
    path: str
    label: str


class LayoutResponse(BaseModel):
    """Shared layout every protected view is rendered inside."""

    title: str
    navigation: List[NavItem]
    content: Any


class DashboardView(BaseModel):
    loading: bool
    selected_status: str
    status_options: List[str]
    stats: StatusCounts
    inquiries: List[Dict[str, Any]]


class ContactsView(BaseModel):
    stats: Optional[ContactStats]
