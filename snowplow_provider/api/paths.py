"""Console path helpers."""

from __future__ import annotations

from ..utils.http_client import ConfigurationError


def organization_path(organization_id: str | None, relative_path: str) -> str:
    """Prefixes ``relative_path`` with ``/organizations/<id>``."""

    if not organization_id:
        raise ConfigurationError("can not make organization specific api request without organization id")
    return f"/organizations/{organization_id}{relative_path}"
