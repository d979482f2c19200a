# storefront/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.api.deps import get_identity, get_session_token, get_current_user
from storefront.domain.errors import IdentityServiceError
from storefront.domain.schemas import SessionIn
from storefront.services.identity_client import IdentityService
from storefront.utils.settings import SESSION_COOKIE_NAME, SESSION_MAX_AGE_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


def _set_session_cookie(response: Response, value: str, max_age: int):
    #cross-site cookie, SameSite=None requires Secure
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=value,
        max_age=max_age,
        path="/",
        httponly=True,
        secure=True,
        samesite="none",
    )


@router.get("/oauth/google/redirect_url")
def google_redirect_url(identity: IdentityService = Depends(get_identity)):
    try:
        redirect_url = identity.get_redirect_url("google")
    except IdentityServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"redirectUrl": redirect_url}


@router.post("/sessions")
def create_session(
    payload: SessionIn,
    response: Response,
    identity: IdentityService = Depends(get_identity),
):
    if not payload.code:
        raise HTTPException(status_code=400, detail="No authorization code provided")

    try:
        session_token = identity.exchange_code(payload.code)
    except IdentityServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    _set_session_cookie(response, session_token, SESSION_MAX_AGE_SECONDS)
    logger.info("Session created")
    return {"success": True}


@router.get("/users/me")
def current_user(user: dict = Depends(get_current_user)):
    return user


@router.get("/logout")
def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    identity: IdentityService = Depends(get_identity),
):
    if token:
        try:
            identity.revoke(token)
        except IdentityServiceError as e:
            #cookie is cleared regardless
            logger.warning(f"Could not revoke session: {e}")

    _set_session_cookie(response, "", 0)
    return {"success": True}
