from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from inq_admin_svc.models.enums import InquiryStatus


class Inquiry(BaseModel):
    """Inquiry record as returned by the remote API.

    Everything except ``status`` is display-only. ``status`` stays the raw string the
    API sent; the client does no validation beyond what the API enforces.
    """

    id: Union[int, str]
    full_name: Optional[str] = Field(default=None, alias="fullName")
    email: Optional[str] = None
    phone: Optional[str] = None
    loan_amount: Optional[float] = Field(default=None, alias="loanAmount")
    loan_type: Optional[str] = Field(default=None, alias="loanType")
    employment_type: Optional[str] = Field(default=None, alias="employmentType")
    monthly_income: Optional[float] = Field(default=None, alias="monthlyIncome")
    status: str = InquiryStatus.pending.value
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class InquiryStatusUpdate(BaseModel):
    """Body of a status change; the only mutation the client performs."""

    status: InquiryStatus

    model_config = ConfigDict()


class ContactStats(BaseModel):
    total_contacts: int = Field(default=0, alias="totalContacts")
    new_contacts: int = Field(default=0, alias="newContacts")
    today_contacts: int = Field(default=0, alias="todayContacts")

    model_config = ConfigDict(populate_by_name=True)


class StatusCounts(BaseModel):
    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
