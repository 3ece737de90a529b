from datetime import datetime
from typing import Any, Dict, Optional, Union

from inq_admin_svc.models.enums import InquiryStatus
from inq_admin_svc.schemas.inquiry import Inquiry

# Badge classes per status; anything unrecognised is shown as pending
STATUS_STYLES = {
    InquiryStatus.approved.value: "bg-green-100 text-green-800",
    InquiryStatus.rejected.value: "bg-red-100 text-red-800",
}
DEFAULT_STATUS_STYLE = "bg-yellow-100 text-yellow-800"

CURRENCY_SYMBOL = "₹"


def status_style(status: Union[InquiryStatus, str, None]) -> str:
    value = getattr(status, "value", status)
    return STATUS_STYLES.get(value, DEFAULT_STATUS_STYLE)


def format_amount(value: Optional[float]) -> str:
    """Rupee amount with thousands separators, e.g. ``150000`` -> ``₹150,000``."""
    if value is None:
        return ""
    if float(value).is_integer():
        return f"{CURRENCY_SYMBOL}{int(value):,}"
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{CURRENCY_SYMBOL}{text}"


def format_timestamp(value: Optional[datetime]) -> str:
    """en-IN style date, e.g. ``5 Mar 2024, 02:30 pm``."""
    if value is None:
        return ""
    return f"{value.day} {value.strftime('%b %Y, %I:%M')} {value.strftime('%p').lower()}"


def inquiry_row(inquiry: Inquiry) -> Dict[str, Any]:
    """Wire-format record plus the display fields the dashboard table shows."""
    row = inquiry.model_dump(by_alias=True, mode="json")
    row["statusStyle"] = status_style(inquiry.status)
    row["loanAmountDisplay"] = format_amount(inquiry.loan_amount)
    row["monthlyIncomeDisplay"] = f"{format_amount(inquiry.monthly_income)}/month" if inquiry.monthly_income is not None else ""
    row["createdAtDisplay"] = format_timestamp(inquiry.created_at)
    return row
