from enum import Enum


class InquiryStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# Filter sentinel meaning "no status filter"
STATUS_ALL = "all"

STATUS_FILTER_OPTIONS = [STATUS_ALL] + [s.value for s in InquiryStatus]
