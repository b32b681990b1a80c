"""Data models for console records, authentication and provider configuration."""

from .auth_models import ErrorResponse, TokenResponse
from .base import ConsoleRecord
from .organization_models import (
    CloudAccount,
    Organization,
    OrganizationCloud,
    OrganizationPackage,
    OrganizationSource,
    SourceMetadata,
)
from .pipeline_models import Pipeline
from .provider_models import EventSpec, ProviderConfig, ResourceData, TrackEventConfig, TrackerSettings
from .user_models import Capability, CapabilityFilter, Permission, User

__all__ = [
    "ConsoleRecord",
    "TokenResponse",
    "ErrorResponse",
    "Organization",
    "OrganizationSource",
    "SourceMetadata",
    "OrganizationPackage",
    "OrganizationCloud",
    "CloudAccount",
    "User",
    "Permission",
    "Capability",
    "CapabilityFilter",
    "Pipeline",
    "ProviderConfig",
    "EventSpec",
    "TrackEventConfig",
    "TrackerSettings",
    "ResourceData",
]
