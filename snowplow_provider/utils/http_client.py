"""Shared HTTP helpers for the Snowplow Console API."""

from __future__ import annotations

import json
import logging
from typing import Dict, Optional

import requests

from ..models import ErrorResponse

API_PATH_PREFIX = "/api/msc/v1"
VERSION_HEADER = "X-SNOWPLOW-TERRAFORM"


class ConsoleError(Exception):
    """Base class for every failure raised by the console client."""


class ConfigurationError(ConsoleError):
    """Raised when required settings (key, organization id, inputs) are missing."""


class AuthenticationError(ConsoleError):
    """Raised when the console refuses to hand out an access token."""


class ApiError(ConsoleError):
    """Raised for any non-200 console response."""

    def __init__(self, message: str, trace_id: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.trace_id = trace_id
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [f"console api failure: {self.message}"]
        if self.trace_id:
            parts.append(f"(traceId={self.trace_id})")
        if self.status_code is not None:
            parts.append(f"(status={self.status_code})")
        return " ".join(parts)


class MalformedResponseError(ConsoleError):
    """Raised when a 200 response does not carry the expected JSON."""


class TransportError(ConsoleError):
    """Raised when the request never produced an HTTP response."""


class TrackingError(ConsoleError):
    """Raised when the Snowplow collector did not accept an event."""


class HttpClient:
    """Issues console requests with the version header and, once known, the bearer token."""

    def __init__(
        self,
        version: str,
        host: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.version = version
        self.base_url = f"{host}{API_PATH_PREFIX}"
        self.timeout = timeout
        self._session = session or requests.Session()
        self._access_token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self._access_token is not None

    def set_access_token(self, token: str) -> None:
        """Stores the bearer token. A client only ever holds one."""

        if self._access_token is not None:
            raise AuthenticationError("console client is already authenticated")
        self._access_token = token

    def get(self, path: str, headers: Optional[Dict[str, str]] = None, log_body: bool = True) -> bytes:
        """GET ``https://<base><path>`` and return the validated JSON body."""

        url = f"https://{self.base_url}{path}"
        request_headers = {VERSION_HEADER: self.version}
        if self._access_token:
            request_headers["Authorization"] = f"Bearer {self._access_token}"
        if headers:
            request_headers.update(headers)

        try:
            response = self._session.get(url, headers=request_headers, timeout=self.timeout)
        except requests.RequestException as exc:
            logging.error("HTTP GET to %s failed: %s", url, exc)
            raise TransportError(f"request to {url} failed: {exc}") from exc

        body = response.content or b""
        if log_body:
            logging.debug("%s:%s\n%s", response.status_code, url, body.decode("utf-8", errors="replace"))
        else:
            logging.debug("%s:%s", response.status_code, url)
        return self._check_response(response.status_code, body)

    def _check_response(self, status_code: int, body: bytes) -> bytes:
        if status_code != 200:
            if not body:
                raise ApiError("unknown error", status_code=status_code)
            try:
                envelope = ErrorResponse.model_validate_json(body)
            except ValueError as exc:
                raise ApiError(body.decode("utf-8", errors="replace"), status_code=status_code) from exc
            raise ApiError(envelope.message or "unknown error", trace_id=envelope.trace_id, status_code=status_code)

        try:
            json.loads(body)
        except ValueError as exc:
            raise MalformedResponseError(f"console returned invalid json content: {body!r}") from exc
        return body

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
