# storefront/services/identity_client.py
from typing import Protocol

import requests
from requests import RequestException
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception

from storefront.domain.errors import IdentityServiceError
from storefront.utils.settings import (
    USERS_SERVICE_API_URL,
    USERS_SERVICE_API_KEY,
    IDENTITY_TIMEOUT_SECONDS,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _is_transient(exc: BaseException) -> bool:
    #4xx from the users service will not change on retry
    if isinstance(exc, requests.HTTPError):
        return exc.response is not None and exc.response.status_code >= 500
    return isinstance(exc, RequestException)


def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception(_is_transient),
    )


class IdentityService(Protocol):
    """External identity collaborator, the storefront never stores passwords or tokens."""

    def get_redirect_url(self, provider: str = "google") -> str: ...

    def exchange_code(self, code: str) -> str: ...

    def validate(self, session_token: str) -> dict | None: ...

    def revoke(self, session_token: str) -> None: ...


class UsersServiceClient:
    """HTTP client of the users service (OAuth login + sessions)."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: int = IDENTITY_TIMEOUT_SECONDS,
    ):
        self.base_url = (base_url or USERS_SERVICE_API_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else USERS_SERVICE_API_KEY
        self.timeout = timeout

    def _headers(self, session_token: str | None = None) -> dict:
        headers = {"x-api-key": self.api_key}
        if session_token:
            headers["Authorization"] = f"Bearer {session_token}"
        return headers

    @http_retry()
    def _get_redirect_url(self, provider: str) -> str:
        url = f"{self.base_url}/oauth/{provider}/redirect_url"
        logger.info(f"UsersServiceClient GET {url}")

        resp = requests.get(url, headers=self._headers(), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()["redirect_url"]

    @http_retry()
    def _exchange_code(self, code: str) -> str:
        url = f"{self.base_url}/sessions"
        logger.info(f"UsersServiceClient POST {url}")

        resp = requests.post(url, json={"code": code}, headers=self._headers(), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()["session_token"]

    @http_retry()
    def _validate(self, session_token: str) -> dict | None:
        url = f"{self.base_url}/users/me"

        resp = requests.get(url, headers=self._headers(session_token), timeout=self.timeout)
        #rejected token, not a transport failure
        if resp.status_code in (401, 403, 404):
            return None
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def _revoke(self, session_token: str) -> None:
        url = f"{self.base_url}/sessions/current"
        logger.info(f"UsersServiceClient DELETE {url}")

        resp = requests.delete(url, headers=self._headers(session_token), timeout=self.timeout)
        if resp.status_code in (401, 404):
            return
        resp.raise_for_status()

    def get_redirect_url(self, provider: str = "google") -> str:
        try:
            return self._get_redirect_url(provider)
        except (RequestException, KeyError) as e:
            logger.error(f"Could not get {provider} redirect url: {e}")
            raise IdentityServiceError("Identity service unavailable") from e

    def exchange_code(self, code: str) -> str:
        try:
            return self._exchange_code(code)
        except (RequestException, KeyError) as e:
            logger.error(f"Code exchange failed: {e}")
            raise IdentityServiceError("Could not exchange authorization code") from e

    def validate(self, session_token: str) -> dict | None:
        try:
            user = self._validate(session_token)
        except RequestException as e:
            logger.error(f"Session validation failed: {e}")
            raise IdentityServiceError("Identity service unavailable") from e

        if not user or "id" not in user:
            return None
        return user

    def revoke(self, session_token: str) -> None:
        try:
            self._revoke(session_token)
        except RequestException as e:
            logger.error(f"Session revoke failed: {e}")
            raise IdentityServiceError("Identity service unavailable") from e
