import os
import logging
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Remote inquiries API; every call goes through /api under this base URL
INQUIRY_API_BASE_URL: str = os.getenv("INQUIRY_API_BASE_URL", "http://api.myvrloan.com")

# Unset means the httpx transport default applies
INQUIRY_API_TIMEOUT: Optional[float] = None
try:
    _raw_timeout = os.getenv("INQUIRY_API_TIMEOUT")
    if _raw_timeout:
        INQUIRY_API_TIMEOUT = float(_raw_timeout)
except Exception as e:
    logging.error(e, exc_info=True)
    INQUIRY_API_TIMEOUT = None

# Cookie holding each operator's token
TOKEN_STORAGE_KEY: str = os.getenv("TOKEN_STORAGE_KEY", "token")

HOST: str = os.getenv("HOST", "0.0.0.0")
try:
    PORT: int = int(os.getenv("PORT", "8000"))
except Exception as e:
    logging.error(e, exc_info=True)
    PORT = 8000

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
