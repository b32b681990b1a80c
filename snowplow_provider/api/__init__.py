"""API layer for authentication, organizations, users and pipelines."""

from .auth_api import AuthAPI
from .console_client import ConsoleClient
from .organization_api import OrganizationAPI
from .pipeline_api import PipelineAPI
from .user_api import UserAPI

__all__ = ["AuthAPI", "ConsoleClient", "OrganizationAPI", "UserAPI", "PipelineAPI"]
