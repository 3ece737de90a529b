from typing import Any

from inq_admin_svc.schemas.layout import LayoutResponse, NavItem

APP_TITLE = "Loan Inquiries"

NAVIGATION = [
    NavItem(path="/", label="Dashboard"),
    NavItem(path="/contacts", label="Contacts"),
]


def render_in_layout(content: Any, title: str = APP_TITLE) -> LayoutResponse:
    """Wrap a protected view's content in the shared layout."""
    return LayoutResponse(title=title, navigation=list(NAVIGATION), content=content)
