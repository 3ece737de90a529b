from .enums import InquiryStatus, STATUS_ALL, STATUS_FILTER_OPTIONS

__all__ = [
    "InquiryStatus",
    "STATUS_ALL",
    "STATUS_FILTER_OPTIONS",
]
