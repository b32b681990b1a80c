"""Models describing Snowplow pipelines."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import ConsoleRecord


class Pipeline(ConsoleRecord):
    """A pipeline resource owned by the configured organization."""

    id: str
    name: str = ""
    cloud_provider: str = Field(default="", alias="cloudProvider")
    collector_endpoints: Optional[List[str]] = Field(default=None, alias="collectorEndpoints")
