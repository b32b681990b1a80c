"""API client for console users of the configured organization."""

from __future__ import annotations

import logging
from typing import List

from ..models import User
from ..utils.http_client import ConsoleError, HttpClient
from .decoding import decode_record, decode_records
from .paths import organization_path

USERS_PATH = "/users"


class UserAPI:
    def __init__(self, http_client: HttpClient, organization_id: str) -> None:
        self._client = http_client
        self._organization_id = organization_id

    def get_user(self, user_id: str) -> User:
        path = organization_path(self._organization_id, f"{USERS_PATH}/{user_id}")
        try:
            body = self._client.get(path)
        except ConsoleError as exc:
            logging.error("Failed to fetch user %s: %s", user_id, exc)
            raise
        return decode_record(User, body)

    def get_users(self) -> List[User]:
        path = organization_path(self._organization_id, USERS_PATH)
        try:
            body = self._client.get(path)
        except ConsoleError as exc:
            logging.error("Failed to fetch users: %s", exc)
            raise
        return decode_records(User, body)
