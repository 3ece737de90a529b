from .auth import Token, LoginRequest, SessionStatus
from .inquiry import (
    Inquiry,
    InquiryStatusUpdate,
    ContactStats,
    StatusCounts,
)
from .layout import NavItem, LayoutResponse, DashboardView, ContactsView

__all__ = [
    "Token",
    "LoginRequest",
    "SessionStatus",
    "Inquiry",
    "InquiryStatusUpdate",
    "ContactStats",
    "StatusCounts",
    "NavItem",
    "LayoutResponse",
    "DashboardView",
    "ContactsView",
]
