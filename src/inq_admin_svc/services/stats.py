import logging
from typing import Optional

from inq_admin_svc.schemas.inquiry import ContactStats
from inq_admin_svc.services.session import SessionContext
from inq_admin_svc.utils.api_client import InquiryApiClient

logger = logging.getLogger(__name__)


async def fetch_contact_stats(api_client: InquiryApiClient, session: SessionContext) -> Optional[ContactStats]:
    """Summary counts for the stats panel, or None when the API call fails."""
    try:
        return await api_client.get_contact_stats(session.token)
    except Exception as e:
        logger.error("Error fetching contact stats: %s", e, exc_info=True)
        return None
