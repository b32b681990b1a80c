"""Models describing console users and their permissions."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import ConsoleRecord


class CapabilityFilter(ConsoleRecord):
    attribute: str = ""
    value: str = ""


class Capability(ConsoleRecord):
    resource_type: str = Field(default="", alias="resourceType")
    action: str = ""
    filters: Optional[List[CapabilityFilter]] = None


class Permission(ConsoleRecord):
    """Capabilities a user holds within one organization."""

    organization_id: str = Field(default="", alias="organizationId")
    capabilities: Optional[List[Capability]] = None


class User(ConsoleRecord):
    """A console user belonging to the configured organization."""

    id: str
    email: str = ""
    organization_id: str = Field(default="", alias="organizationId")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    job_title: Optional[str] = Field(default=None, alias="jobTitle")
    last_login: Optional[str] = Field(default=None, alias="lastLogin")
    permissions: Optional[List[Permission]] = None
