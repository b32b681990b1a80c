"""Configuration layering helpers: environment lookups and fallback chains."""

from __future__ import annotations

import os
from typing import Any, Optional

API_KEY_ENV = "SNOWPLOW_CONSOLE_API_KEY"
API_KEY_ID_ENV = "SNOWPLOW_CONSOLE_API_KEY_ID"
ORGANIZATION_ID_ENV = "SNOWPLOW_CONSOLE_ORGANIZATION_ID"

DEFAULT_CONSOLE_ENDPOINT = "console.snowplowanalytics.com"
DEFAULT_EMITTER_REQUEST_TYPE = "POST"
DEFAULT_EMITTER_PROTOCOL = "HTTPS"
DEFAULT_TRACKER_PLATFORM = "srv"


def env_str(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def is_unset(value: Any, empty_is_unset: bool = True) -> bool:
    if value is None:
        return True
    return empty_is_unset and value == ""


def merge_with_fallback(*candidates: Any, empty_is_unset: bool = True, default: Any = None) -> Any:
    """Returns the first candidate that is set, else ``default``.

    Candidates are ordered from most to least specific, e.g. a resource-level
    value, then the provider-level value, then an environment variable. With
    ``empty_is_unset`` an empty string falls through like ``None`` does;
    without it an explicit ``""`` wins.
    """

    for candidate in candidates:
        if not is_unset(candidate, empty_is_unset):
            return candidate
    return default
