"""Authenticated console client exposing the typed fetch operations."""

from __future__ import annotations

from typing import List, Optional

import requests

from ..models import Organization, Pipeline, User
from ..utils.http_client import HttpClient
from .auth_api import AuthAPI
from .organization_api import OrganizationAPI
from .pipeline_api import PipelineAPI
from .user_api import UserAPI


class ConsoleClient:
    """Authenticates on construction and then serves organization, user and pipeline reads.

    The token is acquired once and never refreshed; a token that expires
    mid-session surfaces as an :class:`~snowplow_provider.utils.http_client.ApiError`
    on the next call.
    """

    def __init__(
        self,
        version: str,
        host: str,
        api_key_id: Optional[str],
        api_key: str,
        organization_id: Optional[str],
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.organization_id = organization_id or ""
        self._http = HttpClient(version=version, host=host, timeout=timeout, session=session)
        try:
            AuthAPI(self._http, self.organization_id).authenticate(api_key_id or "", api_key)
        except Exception:
            self._http.close()
            raise

        self._organizations = OrganizationAPI(self._http)
        self._users = UserAPI(self._http, self.organization_id)
        self._pipelines = PipelineAPI(self._http, self.organization_id)

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def get_organizations(self) -> List[Organization]:
        return self._organizations.get_organizations()

    def get_user(self, user_id: str) -> User:
        return self._users.get_user(user_id)

    def get_users(self) -> List[User]:
        return self._users.get_users()

    def get_pipeline(self, pipeline_id: str) -> Pipeline:
        return self._pipelines.get_pipeline(pipeline_id)

    def get_pipelines(self) -> List[Pipeline]:
        return self._pipelines.get_pipelines()

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ConsoleClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
