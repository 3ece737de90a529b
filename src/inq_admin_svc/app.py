from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager

from inq_admin_svc import config
from inq_admin_svc.utils.api_client import InquiryApiClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build the shared API client and close it on shutdown."""
    api_client = None
    try:
        try:
            api_client = InquiryApiClient(config.INQUIRY_API_BASE_URL, timeout=config.INQUIRY_API_TIMEOUT)
            app.state.api_client = api_client
            logger.info("Inquiry API client ready for %s", config.INQUIRY_API_BASE_URL)
        except Exception as e:
            logger.error(e, exc_info=True)
            # re-raise so startup fails visibly
            raise
        yield
    finally:
        try:
            if api_client is not None:
                await api_client.aclose()
                logger.info("Inquiry API client closed")
        except Exception as e:
            logger.error(e, exc_info=True)


app = FastAPI(title="inq_admin_svc", lifespan=lifespan)

# Import and register routers directly. Keep app file minimal.
from inq_admin_svc.routers import auth_router, dashboard_router, contacts_router
from inq_admin_svc.routers.auth import LoginRequired, login_required_handler

app.add_exception_handler(LoginRequired, login_required_handler)

app.include_router(auth_router, tags=["auth"])
app.include_router(dashboard_router, tags=["inquiries"])
app.include_router(contacts_router, tags=["contacts"])
