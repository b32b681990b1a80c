"""``organization`` data source: the single organization behind the credentials."""

from __future__ import annotations

from typing import Any, Mapping

from ..api.console_client import ConsoleClient
from ..schema import INT64, STRING, Schema, list_attribute, list_of, object_attribute, object_of, string_attribute
from ..utils.http_client import ConfigurationError
from .base import ConsoleDataSource


class OrganizationCountError(ConfigurationError):
    """Raised when the credentials do not map to exactly one organization."""

    def __init__(self, count: int) -> None:
        super().__init__(f"expected single console organization: received {count}")
        self.count = count


ORGANIZATION_SCHEMA = Schema(
    attributes={
        "id": string_attribute(computed=True),
        "name": string_attribute(computed=True),
        "domain": string_attribute(computed=True),
        "tier": string_attribute(computed=True),
        "tags": list_attribute(STRING, computed=True, optional=True),
        "esso_domain": string_attribute(computed=True, optional=True),
        "features": list_attribute(STRING, computed=True, optional=True),
        "source": object_attribute(
            {
                "name": STRING,
                "metadata": object_of(
                    {
                        "databricks_organization_id": INT64,
                        "account_locator": STRING,
                        "account_locator_with_region": STRING,
                    }
                ),
            },
            computed=True,
            optional=True,
        ),
        "packages": list_attribute(object_of({}), computed=True, optional=True),
        "cloud": object_attribute(
            {
                "provider": STRING,
                "accounts": list_of(
                    object_of(
                        {
                            "provider": STRING,
                            "account_id": STRING,
                            "iam_permissions_boundary": STRING,
                            "subscription_id": STRING,
                            "subscription_name": STRING,
                            "tenant_id": STRING,
                            "project": STRING,
                        }
                    )
                ),
            },
            computed=True,
            optional=True,
        ),
    }
)


def populate_organization(client: ConsoleClient, config: Mapping[str, Any]) -> Mapping[str, Any]:
    organizations = client.get_organizations()
    if len(organizations) != 1:
        raise OrganizationCountError(len(organizations))
    return organizations[0].model_dump()


def new_organization_data_source() -> ConsoleDataSource:
    return ConsoleDataSource("organization", ORGANIZATION_SCHEMA, populate_organization)
