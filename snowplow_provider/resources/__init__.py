"""Managed resources exposed by the provider."""

from .track_self_describing_event import (
    TrackSelfDescribingEventResource,
    emit_event,
    resolve_tracker_settings,
)

RESOURCE_FACTORIES = [TrackSelfDescribingEventResource]

__all__ = [
    "RESOURCE_FACTORIES",
    "TrackSelfDescribingEventResource",
    "emit_event",
    "resolve_tracker_settings",
]
