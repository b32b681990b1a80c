"""Models for provider-level and resource-level configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel

if TYPE_CHECKING:
    from ..api.console_client import ConsoleClient


class ProviderConfig(BaseModel):
    """Inputs accepted by the ``snowplow`` provider block."""

    collector_uri: Optional[str] = None
    tracker_app_id: Optional[str] = None
    tracker_namespace: Optional[str] = None
    tracker_platform: Optional[str] = None
    emitter_request_type: Optional[str] = None
    emitter_protocol: Optional[str] = None
    console_api_endpoint: Optional[str] = None
    console_api_key_id: Optional[str] = None
    console_api_key: Optional[str] = None
    console_organization_id: Optional[str] = None


class EventSpec(BaseModel):
    """A self-describing JSON: an Iglu schema URI plus its JSON payload string."""

    iglu_uri: str
    payload: str


class TrackEventConfig(BaseModel):
    """Inputs (and state) of the ``track_self_describing_event`` resource."""

    id: Optional[str] = None
    create_event: Optional[EventSpec] = None
    update_event: Optional[EventSpec] = None
    delete_event: Optional[EventSpec] = None
    contexts: Optional[List[EventSpec]] = None
    collector_uri: Optional[str] = None
    emitter_request_type: Optional[str] = None
    emitter_protocol: Optional[str] = None
    tracker_namespace: Optional[str] = None
    tracker_app_id: Optional[str] = None
    tracker_platform: Optional[str] = None


class TrackerSettings(BaseModel):
    """Emitter and tracker options after merging resource and provider settings."""

    collector_uri: str
    emitter_request_type: str
    emitter_protocol: str
    tracker_namespace: Optional[str] = None
    tracker_app_id: Optional[str] = None
    tracker_platform: Optional[str] = None


@dataclass(frozen=True)
class ResourceData:
    """What a configured provider hands to its data sources and resources."""

    config: ProviderConfig
    client: Optional["ConsoleClient"] = None

    def get_api_client(self) -> Optional["ConsoleClient"]:
        return self.client
