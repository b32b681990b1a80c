"""Common shell shared by every console data source."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Protocol

from ..api.console_client import ConsoleClient
from ..schema import Schema
from ..utils.http_client import ConfigurationError

Populator = Callable[[ConsoleClient, Mapping[str, Any]], Mapping[str, Any]]


class ApiClientProvider(Protocol):
    def get_api_client(self) -> Optional[ConsoleClient]:
        ...


class ConsoleDataSource:
    """A read-only data source: one schema, one client call per read."""

    def __init__(self, name: str, schema: Schema, populator: Populator) -> None:
        self.name = name
        self._schema = schema
        self._populator = populator
        self._client: Optional[ConsoleClient] = None

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_{self.name}"

    def describe_schema(self) -> Schema:
        return self._schema

    def configure(self, provider_data: Optional[ApiClientProvider]) -> None:
        # The host may configure data sources before the provider itself.
        if provider_data is None:
            return
        get_api_client = getattr(provider_data, "get_api_client", None)
        if not callable(get_api_client):
            raise ConfigurationError(
                f"Expected ApiClientProvider, got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers."
            )
        self._client = get_api_client()

    def read(self, config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        if self._client is None:
            raise ConfigurationError(
                "console api client not configured: set provider console_api_key or use SNOWPLOW_CONSOLE_API_KEY"
            )
        config = dict(config or {})
        self._schema.validate_config(config)
        logging.debug("Reading data source %s", self.name)
        return self._schema.project(self._populator(self._client, config))
