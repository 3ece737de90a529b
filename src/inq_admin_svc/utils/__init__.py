from .api_client import InquiryApiClient, InquiryApiError
from .token_storage import TokenStorage, MemoryTokenStorage
from .formatting import status_style, format_amount, format_timestamp, inquiry_row

__all__ = [
    "InquiryApiClient",
    "InquiryApiError",
    "TokenStorage",
    "MemoryTokenStorage",
    "status_style",
    "format_amount",
    "format_timestamp",
    "inquiry_row",
]
