import logging
from typing import Optional

from inq_admin_svc.schemas.auth import LoginRequest
from inq_admin_svc.utils.api_client import InquiryApiClient
from inq_admin_svc.utils.token_storage import TokenStorage

logger = logging.getLogger(__name__)


class SessionContext:
    """Authenticated-session state backed by a stored credential token.

    The session is authenticated iff a token is present in storage at evaluation time.
    Nothing is cached: every read goes back to storage. Token validity is never checked
    locally; an expired token only shows up as a failed API call.
    """

    def __init__(self, storage: TokenStorage, api_client: InquiryApiClient) -> None:
        self.storage = storage
        self.api_client = api_client

    @property
    def token(self) -> Optional[str]:
        return self.storage.get()

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    async def login(self, credentials: LoginRequest) -> str:
        """Authenticate against the remote API and persist the returned token.

        Raises InquiryApiError when the API rejects the credentials; storage is untouched.
        """
        try:
            token = await self.api_client.authenticate(credentials)
        except Exception as e:
            logger.error("Login failed for %s: %s", credentials.email, e, exc_info=True)
            raise
        self.storage.set(token)
        logger.info("Session started for %s", credentials.email)
        return token

    def logout(self) -> None:
        self.storage.clear()
        logger.info("Session cleared")
