"""``pipeline`` and ``pipelines`` data sources."""

from __future__ import annotations

from typing import Any, Mapping

from ..api.console_client import ConsoleClient
from ..schema import STRING, Schema, list_attribute, list_of, object_of, string_attribute
from .base import ConsoleDataSource

PIPELINE_TYPE = object_of(
    {
        "id": STRING,
        "name": STRING,
        "cloud_provider": STRING,
        "collector_endpoints": list_of(STRING),
    }
)

PIPELINE_SCHEMA = Schema(
    attributes={
        "id": string_attribute(required=True),
        "name": string_attribute(computed=True),
        "cloud_provider": string_attribute(computed=True),
        "collector_endpoints": list_attribute(STRING, computed=True),
    }
)

PIPELINES_SCHEMA = Schema(attributes={"pipelines": list_attribute(PIPELINE_TYPE, computed=True)})


def populate_pipeline(client: ConsoleClient, config: Mapping[str, Any]) -> Mapping[str, Any]:
    return client.get_pipeline(config["id"]).model_dump()


def populate_pipelines(client: ConsoleClient, config: Mapping[str, Any]) -> Mapping[str, Any]:
    return {"pipelines": [pipeline.model_dump() for pipeline in client.get_pipelines()]}


def new_pipeline_data_source() -> ConsoleDataSource:
    return ConsoleDataSource("pipeline", PIPELINE_SCHEMA, populate_pipeline)


def new_pipelines_data_source() -> ConsoleDataSource:
    return ConsoleDataSource("pipelines", PIPELINES_SCHEMA, populate_pipelines)
