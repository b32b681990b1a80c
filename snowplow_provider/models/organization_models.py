"""Models describing a console organization."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import ConsoleRecord


class SourceMetadata(ConsoleRecord):
    databricks_organization_id: int = Field(default=0, alias="databricksOrganizationId")
    account_locator: str = Field(default="", alias="accountLocator")
    account_locator_with_region: str = Field(default="", alias="accountLocatorWithRegion")


class OrganizationSource(ConsoleRecord):
    """Marketplace the organization was provisioned through, if any."""

    name: Optional[str] = None
    metadata: SourceMetadata = Field(default_factory=SourceMetadata)


class OrganizationPackage(ConsoleRecord):
    """Packages carry no fields the provider exposes."""


class CloudAccount(ConsoleRecord):
    provider: str = ""
    account_id: Optional[str] = Field(default=None, alias="accountId")
    iam_permissions_boundary: Optional[str] = Field(default=None, alias="iamPermissionsBoundary")
    subscription_id: Optional[str] = Field(default=None, alias="subscriptionId")
    subscription_name: Optional[str] = Field(default=None, alias="subscriptionName")
    tenant_id: Optional[str] = Field(default=None, alias="tenantId")
    project: Optional[str] = None


class OrganizationCloud(ConsoleRecord):
    provider: str = ""
    accounts: Optional[List[CloudAccount]] = None


class Organization(ConsoleRecord):
    """An organization visible to the authenticated credentials."""

    id: str
    name: Optional[str] = None
    domain: Optional[str] = None
    tier: str = ""
    tags: Optional[List[str]] = None
    esso_domain: Optional[str] = Field(default=None, alias="essoDomain")
    features: Optional[List[str]] = None
    source: Optional[OrganizationSource] = None
    packages: Optional[List[OrganizationPackage]] = None
    cloud: Optional[OrganizationCloud] = None
