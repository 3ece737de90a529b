from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from inq_admin_svc import config
from inq_admin_svc.models.enums import InquiryStatus
from inq_admin_svc.schemas.auth import LoginRequest
from inq_admin_svc.schemas.inquiry import ContactStats, Inquiry

_logger = logging.getLogger(__name__)

_inquiry_list_adapter = TypeAdapter(List[Inquiry])

InquiryId = Union[int, str]


class InquiryApiError(RuntimeError):
    """Any failure talking to the remote inquiries API.

    Covers non-success responses, transport errors and malformed bodies alike.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InquiryApiClient:
    """Async HTTP client for the remote inquiries API.

    Holds no credentials of its own: callers pass the session token on every call and
    it is sent as ``Authorization: Bearer <token>``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or config.INQUIRY_API_BASE_URL).rstrip("/")
        kwargs: Dict[str, Any] = {"base_url": self.base_url}
        if timeout is not None:
            kwargs["timeout"] = timeout
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    @staticmethod
    def _auth_headers(token: Optional[str]) -> Dict[str, str]:
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    async def _request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, headers=self._auth_headers(token), json=json)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            _logger.error(e, exc_info=True)
            raise InquiryApiError(
                f"{method} {path} failed with status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            _logger.error(e, exc_info=True)
            raise InquiryApiError(f"{method} {path} failed: {e}") from e

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            _logger.error(e, exc_info=True)
            raise InquiryApiError("Remote API returned a non-JSON body", status_code=response.status_code) from e

    async def authenticate(self, credentials: LoginRequest) -> str:
        """Exchange credentials for a token. The token may be under ``token`` or ``access_token``."""
        response = await self._request(
            "POST",
            "/api/auth/login",
            json={"email": str(credentials.email), "password": credentials.password},
        )
        data = self._json(response)
        token = None
        if isinstance(data, dict):
            token = data.get("token") or data.get("access_token")
        if not isinstance(token, str) or not token:
            raise InquiryApiError("Login response did not include a token", status_code=response.status_code)
        return token

    async def list_inquiries(self, token: Optional[str]) -> List[Inquiry]:
        response = await self._request("GET", "/api/inquiries", token=token)
        data = self._json(response)
        try:
            return _inquiry_list_adapter.validate_python(data)
        except ValidationError as e:
            _logger.error(e, exc_info=True)
            raise InquiryApiError("Remote API returned a malformed inquiry list") from e

    async def update_inquiry_status(
        self, token: Optional[str], inquiry_id: InquiryId, status: Union[InquiryStatus, str]
    ) -> None:
        status_value = getattr(status, "value", status)
        await self._request("PATCH", f"/api/inquiries/{inquiry_id}", token=token, json={"status": status_value})

    async def delete_inquiry(self, token: Optional[str], inquiry_id: InquiryId) -> None:
        await self._request("DELETE", f"/api/inquiries/{inquiry_id}", token=token)

    async def get_contact_stats(self, token: Optional[str]) -> ContactStats:
        response = await self._request("GET", "/api/contacts/stats", token=token)
        data = self._json(response)
        try:
            return ContactStats.model_validate(data)
        except ValidationError as e:
            _logger.error(e, exc_info=True)
            raise InquiryApiError("Remote API returned malformed contact stats") from e

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()
