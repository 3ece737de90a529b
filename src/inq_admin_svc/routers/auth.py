from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse
from fastapi.security import OAuth2PasswordBearer

from inq_admin_svc import config
from inq_admin_svc.schemas.auth import LoginRequest, SessionStatus, Token
from inq_admin_svc.services.session import SessionContext
from inq_admin_svc.utils.api_client import InquiryApiClient, InquiryApiError
from inq_admin_svc.utils.token_storage import MemoryTokenStorage

logger = logging.getLogger(__name__)

auth_router = APIRouter()

LOGIN_PATH = "/login"

# auto_error=False: a missing header falls back to the session cookie
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=LOGIN_PATH, auto_error=False)


class LoginRequired(Exception):
    """Raised by the route guard; the app answers with a redirect to the login screen."""


def get_api_client(request: Request) -> InquiryApiClient:
    return request.app.state.api_client


def get_session(
    request: Request,
    bearer_token: Optional[str] = Depends(oauth2_scheme),
    api_client: InquiryApiClient = Depends(get_api_client),
) -> SessionContext:
    """Session of the calling operator, built from their Bearer header or cookie."""
    token = bearer_token or request.cookies.get(config.TOKEN_STORAGE_KEY)
    return SessionContext(MemoryTokenStorage(token=token), api_client)


def require_authenticated(session: SessionContext = Depends(get_session)) -> SessionContext:
    if not session.is_authenticated:
        raise LoginRequired()
    return session


async def login_required_handler(request: Request, exc: LoginRequired) -> RedirectResponse:
    logger.info("Unauthenticated request to %s redirected to %s", request.url.path, LOGIN_PATH)
    return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)


@auth_router.get("/login", response_model=SessionStatus)
def login_page(session: SessionContext = Depends(get_session)) -> SessionStatus:
    return SessionStatus(authenticated=session.is_authenticated)


@auth_router.post("/login", response_model=Token)
async def login(
    request: LoginRequest,
    response: Response,
    session: SessionContext = Depends(get_session),
) -> Token:
    credential_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        token = await session.login(request)
    except InquiryApiError as e:
        logger.error(e, exc_info=True)
        raise credential_exception
    except Exception as e:
        logger.error(e, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    response.set_cookie(config.TOKEN_STORAGE_KEY, token, httponly=True, samesite="lax")
    return Token(access_token=token, token_type="bearer")


@auth_router.post("/logout")
def logout(session: SessionContext = Depends(get_session)) -> RedirectResponse:
    session.logout()
    response = RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(config.TOKEN_STORAGE_KEY)
    return response
