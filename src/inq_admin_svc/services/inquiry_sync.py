import logging
from typing import Awaitable, Callable, List, Sequence, Union

from inq_admin_svc.models.enums import InquiryStatus, STATUS_ALL, STATUS_FILTER_OPTIONS
from inq_admin_svc.schemas.inquiry import Inquiry, StatusCounts
from inq_admin_svc.services.session import SessionContext
from inq_admin_svc.utils.api_client import InquiryApiClient, InquiryId

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[], bool]


def filter_by_status(inquiries: Sequence[Inquiry], status: Union[InquiryStatus, str]) -> List[Inquiry]:
    """Derived view of ``inquiries``; ``"all"`` keeps everything, in order."""
    value = getattr(status, "value", status)
    if value == STATUS_ALL:
        return list(inquiries)
    return [inquiry for inquiry in inquiries if inquiry.status == value]


def count_by_status(inquiries: Sequence[Inquiry]) -> StatusCounts:
    per_status = {status.value: len(filter_by_status(inquiries, status)) for status in InquiryStatus}
    return StatusCounts(total=len(inquiries), **per_status)


class InquiryListSynchronizer:
    """Local mirror of the remote inquiry collection.

    ``inquiries`` is always the full, unfiltered result of the last successful fetch.
    Mutations go to the remote API first and are followed by a full re-fetch; the mirror
    is never patched locally. Concurrent calls are not coordinated: overlapping
    re-fetches each replace the list and the last one to resolve wins.
    """

    def __init__(self, api_client: InquiryApiClient, session: SessionContext) -> None:
        self.api_client = api_client
        self.session = session
        self.inquiries: List[Inquiry] = []
        self.loading: bool = True
        self.selected_status: str = STATUS_ALL

    @property
    def visible(self) -> List[Inquiry]:
        return filter_by_status(self.inquiries, self.selected_status)

    @property
    def counts(self) -> StatusCounts:
        return count_by_status(self.inquiries)

    def select_status(self, status: Union[InquiryStatus, str]) -> None:
        value = getattr(status, "value", status)
        if value not in STATUS_FILTER_OPTIONS:
            raise ValueError(f"Unknown status filter: {value!r}")
        self.selected_status = value

    async def fetch_all(self) -> List[Inquiry]:
        """Replace the mirror with the remote collection; keep it as-is on failure."""
        self.loading = True
        try:
            self.inquiries = await self.api_client.list_inquiries(self.session.token)
        except Exception as e:
            logger.error("Error fetching inquiries: %s", e, exc_info=True)
        finally:
            self.loading = False
        return self.inquiries

    async def _mutate_then_resync(self, action: str, mutation: Callable[[], Awaitable[None]]) -> bool:
        try:
            await mutation()
        except Exception as e:
            logger.error("Error %s inquiry: %s", action, e, exc_info=True)
            return False
        await self.fetch_all()
        return True

    async def update_status(self, inquiry_id: InquiryId, new_status: Union[InquiryStatus, str]) -> bool:
        status = InquiryStatus(new_status)

        async def mutation() -> None:
            await self.api_client.update_inquiry_status(self.session.token, inquiry_id, status)

        return await self._mutate_then_resync("updating", mutation)

    async def delete_one(self, inquiry_id: InquiryId, confirm: ConfirmCallback) -> bool:
        """Delete one inquiry once ``confirm()`` agrees; declining makes no network call."""
        if not confirm():
            logger.info("Deletion of inquiry %s cancelled", inquiry_id)
            return False

        async def mutation() -> None:
            await self.api_client.delete_inquiry(self.session.token, inquiry_id)

        return await self._mutate_then_resync("deleting", mutation)
