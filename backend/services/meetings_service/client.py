"""Authenticated HTTP client for the meeting provider API.

Every outbound call is signed with a fresh HS256 bearer token whose issuer is
the API key and whose expiry is one minute after issuance. Tokens are never
cached, so concurrent callers can share one client instance safely.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Union

import requests
from jose import jwt

from . import timefmt
from .errors import ConfigError, TransportError
from .schemas import Credentials, HTTPMethod

logger = logging.getLogger(__name__)

TOKEN_TTL_SECONDS = 60
TOKEN_ALGORITHM = "HS256"


class SignedAPIClient:
    def __init__(self, credentials: Credentials, *, timeout: Optional[float] = 30.0) -> None:
        self.credentials = credentials
        self.timeout = timeout

    # -------- Tokens --------
    def issue_token(self) -> str:
        api_key = self.credentials.api_key
        api_secret = self.credentials.api_secret
        if not api_key or not api_secret:
            raise ConfigError("API_KEY and API_SECRET must be set to sign provider requests")
        claims = {
            "iss": api_key,
            "exp": int(time.time()) + TOKEN_TTL_SECONDS,
        }
        return jwt.encode(claims, api_secret, algorithm=TOKEN_ALGORITHM)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.issue_token()}",
            "Content-Type": "application/json",
        }

    # -------- Requests --------
    def send(
        self,
        method: Union[HTTPMethod, str],
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> requests.Response:
        """Perform one signed call to ``base_url + path`` and return the raw response.

        Non-2xx responses are returned as-is; interpreting them is up to the caller.
        """

        verb = HTTPMethod(method.upper() if isinstance(method, str) else method)
        base_url = self.credentials.base_url
        if not base_url:
            raise ConfigError("API_BASE_URL must be set to reach the provider")
        url = base_url + path
        headers = self._headers()

        try:
            response = requests.request(
                verb.value,
                url,
                params=dict(query) if query else None,
                json=dict(body) if body is not None else None,
                headers=headers,
                timeout=self.timeout,
            )
        except (
            requests.ConnectionError,
            requests.Timeout,
            requests.exceptions.ChunkedEncodingError,
            requests.exceptions.ContentDecodingError,
        ) as exc:
            logger.warning("Provider call %s %s failed: %s", verb.value, url, exc)
            raise TransportError(f"{verb.value} {url} failed: {exc}") from exc

        logger.debug("Provider call %s %s -> %s", verb.value, url, response.status_code)
        return response

    def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return self.send(HTTPMethod.GET, path, query=query)

    def post(self, path: str, body: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return self.send(HTTPMethod.POST, path, body=body or {})

    def patch(self, path: str, body: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return self.send(HTTPMethod.PATCH, path, body=body or {})

    def delete(self, path: str, body: Optional[Mapping[str, Any]] = None) -> requests.Response:
        return self.send(HTTPMethod.DELETE, path, body=body)

    # -------- Time helpers --------
    @staticmethod
    def to_provider_time_format(value: str) -> str:
        return timefmt.to_provider_time_format(value)

    @staticmethod
    def to_unix_timestamp(value: str, timezone_name: str) -> Optional[int]:
        return timefmt.to_unix_timestamp(value, timezone_name)


__all__ = ["SignedAPIClient", "TOKEN_ALGORITHM", "TOKEN_TTL_SECONDS"]
