"""API client responsible for fetching organizations."""

from __future__ import annotations

import logging
from typing import List

from ..models import Organization
from ..utils.http_client import ConsoleError, HttpClient
from .decoding import decode_records

ORGANIZATIONS_PATH = "/organizations"


class OrganizationAPI:
    """Lists the organizations visible to the authenticated credentials."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def get_organizations(self) -> List[Organization]:
        try:
            body = self._client.get(ORGANIZATIONS_PATH)
        except ConsoleError as exc:
            logging.error("Failed to fetch organizations: %s", exc)
            raise
        return decode_records(Organization, body)
