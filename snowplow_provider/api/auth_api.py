"""Token exchange against the console credentials endpoints."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ..models import TokenResponse
from ..utils.http_client import (
    AuthenticationError,
    ConfigurationError,
    ConsoleError,
    HttpClient,
)
from .paths import organization_path

V2_TOKEN_PATH = "/credentials/v2/token"
V3_TOKEN_PATH = "/credentials/v3/token"


class AuthAPI:
    """Obtains the bearer token the rest of the client relies on.

    Without a key id the legacy v2 endpoint is used with the secret alone;
    with one, the v3 endpoint receives both.
    """

    def __init__(self, http_client: HttpClient, organization_id: str) -> None:
        self._client = http_client
        self._organization_id = organization_id

    def authenticate(self, api_key_id: str, api_key: str) -> str:
        if not api_key:
            raise ConfigurationError("console api key required to authenticate")

        if not api_key_id:
            try:
                path = organization_path(self._organization_id, V2_TOKEN_PATH)
            except ConfigurationError as exc:
                raise ConfigurationError(f"error requesting v2 token; do you need a key ID to use v3?: {exc}") from exc
            headers = {"X-API-KEY": api_key}
        else:
            path = organization_path(self._organization_id, V3_TOKEN_PATH)
            headers = {"X-API-KEY-ID": api_key_id, "X-API-KEY": api_key}

        try:
            body = self._client.get(path, headers=headers, log_body=False)
        except ConsoleError as exc:
            logging.error("Console token request failed: %s", exc)
            raise AuthenticationError(f"unable to obtain console api token: {exc}") from exc

        try:
            token = TokenResponse.model_validate_json(body)
        except ValidationError as exc:
            raise AuthenticationError(f"unable to obtain console api token: {body!r}") from exc
        if not token.access_token:
            raise AuthenticationError(f"unable to obtain console api token: {body!r}")

        self._client.set_access_token(token.access_token)
        logging.info("Authenticated with the console using the %s token endpoint", "v3" if api_key_id else "v2")
        return token.access_token
