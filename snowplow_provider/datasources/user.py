"""``user`` and ``users`` data sources."""

from __future__ import annotations

from typing import Any, Mapping

from ..api.console_client import ConsoleClient
from ..schema import STRING, Schema, list_attribute, list_of, object_of, string_attribute
from .base import ConsoleDataSource

PERMISSION_TYPE = object_of(
    {
        "organization_id": STRING,
        "capabilities": list_of(
            object_of(
                {
                    "resource_type": STRING,
                    "action": STRING,
                    "filters": list_of(object_of({"attribute": STRING, "value": STRING})),
                }
            )
        ),
    }
)

USER_TYPE = object_of(
    {
        "id": STRING,
        "email": STRING,
        "organization_id": STRING,
        "first_name": STRING,
        "last_name": STRING,
        "job_title": STRING,
        "last_login": STRING,
        "permissions": list_of(PERMISSION_TYPE),
    }
)

USER_SCHEMA = Schema(
    attributes={
        "id": string_attribute(required=True),
        "email": string_attribute(computed=True),
        "organization_id": string_attribute(computed=True),
        "first_name": string_attribute(computed=True),
        "last_name": string_attribute(computed=True),
        "job_title": string_attribute(computed=True),
        "last_login": string_attribute(computed=True),
        "permissions": list_attribute(PERMISSION_TYPE, computed=True),
    }
)

USERS_SCHEMA = Schema(attributes={"users": list_attribute(USER_TYPE, computed=True)})


def populate_user(client: ConsoleClient, config: Mapping[str, Any]) -> Mapping[str, Any]:
    return client.get_user(config["id"]).model_dump()


def populate_users(client: ConsoleClient, config: Mapping[str, Any]) -> Mapping[str, Any]:
    return {"users": [user.model_dump() for user in client.get_users()]}


def new_user_data_source() -> ConsoleDataSource:
    return ConsoleDataSource("user", USER_SCHEMA, populate_user)


def new_users_data_source() -> ConsoleDataSource:
    return ConsoleDataSource("users", USERS_SCHEMA, populate_users)
