"""Resource that emits a Snowplow self-describing event on create, update and delete."""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError
from snowplow_tracker import Emitter, SelfDescribing, SelfDescribingJson, Subject, Tracker

from ..models import EventSpec, ProviderConfig, ResourceData, TrackEventConfig, TrackerSettings
from ..schema import STRING, Schema, list_attribute, object_attribute, object_of, string_attribute
from ..utils.config import merge_with_fallback
from ..utils.http_client import ConfigurationError, TrackingError

# Each lifecycle step is sent exactly once; failed events are not re-queued.
NO_RETRY_CODES = {code: False for code in range(-1, 600)}

EVENT_TYPE = {"iglu_uri": STRING, "payload": STRING}

TRACK_EVENT_SCHEMA = Schema(
    description="Emits a self-describing event to a Snowplow collector whenever the resource changes",
    attributes={
        "id": string_attribute(computed=True),
        "create_event": object_attribute(EVENT_TYPE, optional=True, description="Event sent when the resource is created"),
        "update_event": object_attribute(EVENT_TYPE, optional=True, description="Event sent when the resource is updated"),
        "delete_event": object_attribute(EVENT_TYPE, optional=True, description="Event sent when the resource is destroyed"),
        "contexts": list_attribute(object_of(EVENT_TYPE), optional=True, description="Entities attached to every event"),
        "collector_uri": string_attribute(optional=True, description="URI of your Snowplow Collector"),
        "emitter_request_type": string_attribute(optional=True, description="Whether to use GET or POST requests to emit events"),
        "emitter_protocol": string_attribute(optional=True, description="Whether to use HTTP or HTTPS to send events"),
        "tracker_namespace": string_attribute(optional=True, description="Optional namespace"),
        "tracker_app_id": string_attribute(optional=True, description="Optional application ID"),
        "tracker_platform": string_attribute(optional=True, description="Optional platform"),
    },
)

MISSING_COLLECTOR_MESSAGE = (
    "URI of the Snowplow Collector is empty - this can be set either at the provider "
    "or resource level with the 'collector_uri' input"
)


def resolve_tracker_settings(provider: ProviderConfig, resource: TrackEventConfig) -> TrackerSettings:
    """Resource-level settings override provider-level ones.

    Collector URI, request type and protocol fall back when blank; namespace,
    app id and platform only fall back when absent, so an explicit empty
    string at resource level clears the provider value.
    """

    collector_uri = merge_with_fallback(resource.collector_uri, provider.collector_uri, default="")
    if not collector_uri:
        raise ConfigurationError(MISSING_COLLECTOR_MESSAGE)

    return TrackerSettings(
        collector_uri=collector_uri,
        emitter_request_type=merge_with_fallback(resource.emitter_request_type, provider.emitter_request_type, default=""),
        emitter_protocol=merge_with_fallback(resource.emitter_protocol, provider.emitter_protocol, default=""),
        tracker_namespace=merge_with_fallback(resource.tracker_namespace, provider.tracker_namespace, empty_is_unset=False),
        tracker_app_id=merge_with_fallback(resource.tracker_app_id, provider.tracker_app_id, empty_is_unset=False),
        tracker_platform=merge_with_fallback(resource.tracker_platform, provider.tracker_platform, empty_is_unset=False),
    )


def to_self_describing_json(spec: EventSpec) -> SelfDescribingJson:
    try:
        data = json.loads(spec.payload)
    except ValueError as exc:
        raise ConfigurationError(f"payload for {spec.iglu_uri} is not valid JSON: {exc}") from exc
    return SelfDescribingJson(spec.iglu_uri, data)


def emit_event(settings: TrackerSettings, event: EventSpec, contexts: Optional[List[EventSpec]] = None) -> int:
    """Sends one event synchronously and returns the number of events the collector accepted."""

    event_json = to_self_describing_json(event)
    context_json = [to_self_describing_json(context) for context in contexts or []] or None
    outcome: Dict[str, int] = {"sent": 0, "failed": 0}

    def on_success(sent_events: List[Any]) -> None:
        outcome["sent"] += len(sent_events)

    def on_failure(sent_count: int, unsent_events: List[Any]) -> None:
        outcome["sent"] += sent_count
        outcome["failed"] += len(unsent_events)

    emitter = Emitter(
        settings.collector_uri,
        protocol=settings.emitter_protocol.lower() or "https",
        method=settings.emitter_request_type.lower() or "post",
        batch_size=1,
        on_success=on_success,
        on_failure=on_failure,
        custom_retry_codes=NO_RETRY_CODES,
    )
    subject = Subject()
    if settings.tracker_platform:
        try:
            subject.set_platform(settings.tracker_platform)
        except ValueError as exc:
            raise ConfigurationError(f"unsupported tracker_platform {settings.tracker_platform!r}") from exc

    tracker = Tracker(
        namespace=settings.tracker_namespace or "",
        emitters=emitter,
        subject=subject,
        app_id=settings.tracker_app_id or None,
        encode_base64=True,
    )
    tracker.track(SelfDescribing(event_json, context=context_json))
    tracker.flush()

    if outcome["failed"] or not outcome["sent"]:
        raise TrackingError(f"collector {settings.collector_uri} rejected event {event.iglu_uri}")
    logging.info("Sent %s to %s", event.iglu_uri, settings.collector_uri)
    return outcome["sent"]


class TrackSelfDescribingEventResource:
    """Lifecycle hooks for ``<provider>_track_self_describing_event``."""

    name = "track_self_describing_event"

    def __init__(self) -> None:
        self._provider_config: Optional[ProviderConfig] = None

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_{self.name}"

    def describe_schema(self) -> Schema:
        return TRACK_EVENT_SCHEMA

    def configure(self, provider_data: Optional[ResourceData]) -> None:
        if provider_data is None:
            return
        if not isinstance(provider_data, ResourceData):
            raise ConfigurationError(
                f"Expected ResourceData, got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers."
            )
        self._provider_config = provider_data.config

    def create(self, plan: Mapping[str, Any]) -> Dict[str, Any]:
        config = self._parse(plan)
        if config.create_event:
            self._emit(config, config.create_event)
        state = config.model_copy(update={"id": str(uuid.uuid4())})
        return TRACK_EVENT_SCHEMA.project(state.model_dump())

    def read(self, state: Mapping[str, Any]) -> Dict[str, Any]:
        return TRACK_EVENT_SCHEMA.project(state)

    def update(self, plan: Mapping[str, Any], state: Mapping[str, Any]) -> Dict[str, Any]:
        config = self._parse(plan)
        if config.update_event:
            self._emit(config, config.update_event)
        updated = config.model_copy(update={"id": state.get("id")})
        return TRACK_EVENT_SCHEMA.project(updated.model_dump())

    def delete(self, state: Mapping[str, Any]) -> None:
        try:
            config = TrackEventConfig.model_validate(dict(state))
        except ValidationError as exc:
            raise ConfigurationError(f"invalid {self.name} state: {exc}") from exc
        if config.delete_event:
            self._emit(config, config.delete_event)

    def _parse(self, plan: Mapping[str, Any]) -> TrackEventConfig:
        values = dict(plan)
        values.pop("id", None)
        TRACK_EVENT_SCHEMA.validate_config(values)
        try:
            return TrackEventConfig.model_validate(values)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid {self.name} configuration: {exc}") from exc

    def _emit(self, config: TrackEventConfig, event: EventSpec) -> None:
        provider_config = self._provider_config or ProviderConfig()
        settings = resolve_tracker_settings(provider_config, config)
        emit_event(settings, event, config.contexts)
