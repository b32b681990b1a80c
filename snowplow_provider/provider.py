"""The ``snowplow`` provider: configuration, console authentication and registration."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import ValidationError

from . import __version__
from .api.console_client import ConsoleClient
from .datasources import DATA_SOURCE_FACTORIES, ConsoleDataSource
from .models import ProviderConfig, ResourceData
from .resources import RESOURCE_FACTORIES, TrackSelfDescribingEventResource
from .schema import Schema, string_attribute
from .utils.config import (
    API_KEY_ENV,
    API_KEY_ID_ENV,
    DEFAULT_CONSOLE_ENDPOINT,
    DEFAULT_EMITTER_PROTOCOL,
    DEFAULT_EMITTER_REQUEST_TYPE,
    DEFAULT_TRACKER_PLATFORM,
    ORGANIZATION_ID_ENV,
    env_str,
    merge_with_fallback,
)
from .utils.http_client import ConfigurationError

PROVIDER_TYPE_NAME = "snowplow"

PROVIDER_SCHEMA = Schema(
    description="Terraform provider for emitting Snowplow events",
    attributes={
        "collector_uri": string_attribute(optional=True, description="URI of your Snowplow Collector"),
        "tracker_app_id": string_attribute(optional=True, description="Optional application ID"),
        "tracker_namespace": string_attribute(optional=True, description="Optional namespace"),
        "tracker_platform": string_attribute(optional=True, description="Optional platform"),
        "emitter_request_type": string_attribute(
            optional=True, description="Whether to use GET or POST requests to emit events"
        ),
        "emitter_protocol": string_attribute(optional=True, description="Whether to use HTTP or HTTPS to send events"),
        "console_api_endpoint": string_attribute(
            optional=True, description="API endpoint hostname to use when interacting with the Console API"
        ),
        "console_api_key_id": string_attribute(
            optional=True, description="Auth API v3 API Key ID to access the Console API with"
        ),
        "console_api_key": string_attribute(
            optional=True, sensitive=True, description="Auth API v2/v3 API Key to access the Console API with"
        ),
        "console_organization_id": string_attribute(
            optional=True, description="Organization ID associated with the console_api_key credentials"
        ),
    },
)

ClientFactory = Callable[..., ConsoleClient]


def apply_provider_defaults(config: ProviderConfig) -> ProviderConfig:
    """Fills blank provider settings from the environment and built-in defaults."""

    return config.model_copy(
        update={
            "emitter_request_type": merge_with_fallback(config.emitter_request_type, default=DEFAULT_EMITTER_REQUEST_TYPE),
            "emitter_protocol": merge_with_fallback(config.emitter_protocol, default=DEFAULT_EMITTER_PROTOCOL),
            "tracker_platform": merge_with_fallback(config.tracker_platform, default=DEFAULT_TRACKER_PLATFORM),
            "console_api_endpoint": merge_with_fallback(config.console_api_endpoint, default=DEFAULT_CONSOLE_ENDPOINT),
            "console_api_key": merge_with_fallback(config.console_api_key, env_str(API_KEY_ENV), default=""),
            "console_api_key_id": merge_with_fallback(config.console_api_key_id, env_str(API_KEY_ID_ENV), default=""),
            "console_organization_id": merge_with_fallback(
                config.console_organization_id, env_str(ORGANIZATION_ID_ENV), default=""
            ),
        }
    )


class SnowplowProvider:
    """Provider shell wiring configuration into the console client and registering data sources."""

    type_name = PROVIDER_TYPE_NAME

    def __init__(self, version: str = __version__, client_factory: ClientFactory = ConsoleClient) -> None:
        self.version = version
        self._client_factory = client_factory

    def metadata(self) -> Dict[str, str]:
        return {"type_name": self.type_name, "version": self.version}

    def describe_schema(self) -> Schema:
        return PROVIDER_SCHEMA

    def configure(self, config: Optional[Mapping[str, Any]] = None) -> ResourceData:
        values = dict(config or {})
        PROVIDER_SCHEMA.validate_config(values)
        try:
            provider_config = apply_provider_defaults(ProviderConfig.model_validate(values))
        except ValidationError as exc:
            raise ConfigurationError(f"invalid provider configuration: {exc}") from exc

        client: Optional[ConsoleClient] = None
        if provider_config.console_api_key:
            logging.info("Authenticating with the console at %s", provider_config.console_api_endpoint)
            client = self._client_factory(
                version=self.version,
                host=provider_config.console_api_endpoint,
                api_key_id=provider_config.console_api_key_id,
                api_key=provider_config.console_api_key,
                organization_id=provider_config.console_organization_id,
            )
        else:
            logging.debug("No console api key configured; console data sources are unavailable")

        return ResourceData(config=provider_config, client=client)

    def data_sources(self) -> List[Callable[[], ConsoleDataSource]]:
        return list(DATA_SOURCE_FACTORIES)

    def resources(self) -> List[Callable[[], TrackSelfDescribingEventResource]]:
        return list(RESOURCE_FACTORIES)

    def data_source(self, name: str, provider_data: Optional[ResourceData] = None) -> ConsoleDataSource:
        """Instantiates the data source registered as ``name`` (with or without the provider prefix)."""

        for factory in self.data_sources():
            data_source = factory()
            if name in (data_source.name, data_source.type_name(self.type_name)):
                data_source.configure(provider_data)
                return data_source
        raise ConfigurationError(f"unknown data source {name!r}")

    def resource(self, name: str, provider_data: Optional[ResourceData] = None) -> TrackSelfDescribingEventResource:
        for factory in self.resources():
            resource = factory()
            if name in (resource.name, resource.type_name(self.type_name)):
                resource.configure(provider_data)
                return resource
        raise ConfigurationError(f"unknown resource {name!r}")
