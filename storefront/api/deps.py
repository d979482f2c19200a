# storefront/api/deps.py
from fastapi import Cookie, Depends, HTTPException

from storefront.domain.errors import IdentityServiceError
from storefront.services.identity_client import IdentityService, UsersServiceClient
from storefront.utils.settings import SESSION_COOKIE_NAME


def get_identity() -> IdentityService:
    return UsersServiceClient()


def get_session_token(
    token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> str | None:
    return token


def get_current_user(
    token: str | None = Depends(get_session_token),
    identity: IdentityService = Depends(get_identity),
) -> dict:
    """Auth gate: session cookie -> user object of the identity service, 401 otherwise."""
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        user = identity.validate(token)
    except IdentityServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    if not user:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def get_current_user_id(user: dict = Depends(get_current_user)) -> str:
    return str(user["id"])
