"""
Pytest configuration and fixtures for snowplow-provider tests.
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

# Add the repository root to path so `snowplow_provider` imports without an install
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


def make_response(status_code=200, body=b""):
    """Build a fake ``requests.Response`` carrying ``body``."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        body = body.encode("utf-8")
    response.content = body
    return response


@pytest.fixture
def session():
    """A mocked requests session; queue responses on ``session.get.side_effect``."""
    mock_session = MagicMock(spec=requests.Session)
    return mock_session


@pytest.fixture(autouse=True)
def clean_console_env(monkeypatch):
    """Keep developer credentials out of the tests."""
    for name in (
        "SNOWPLOW_CONSOLE_API_KEY",
        "SNOWPLOW_CONSOLE_API_KEY_ID",
        "SNOWPLOW_CONSOLE_ORGANIZATION_ID",
        "SNOWPLOW_CONSOLE_API_ENDPOINT",
        "SNOWPLOW_COLLECTOR_URI",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def organization_json():
    """A fully populated organization as the console returns it."""
    return {
        "id": "o1",
        "name": "Acme",
        "domain": "acme.com",
        "tier": "enterprise",
        "tags": ["internal"],
        "essoDomain": None,
        "features": ["data-products"],
        "source": {
            "name": "snowflake",
            "metadata": {
                "databricksOrganizationId": 42,
                "accountLocator": "AB123",
                "accountLocatorWithRegion": "AB123.eu-west-1",
            },
        },
        "packages": [{}],
        "cloud": {
            "provider": "aws",
            "accounts": [
                {
                    "provider": "aws",
                    "accountId": "123456789012",
                    "iamPermissionsBoundary": None,
                    "subscriptionId": None,
                    "subscriptionName": None,
                    "tenantId": None,
                    "project": None,
                }
            ],
        },
    }


@pytest.fixture
def user_json():
    return {
        "id": "u1",
        "email": "jane@acme.com",
        "organizationId": "o1",
        "firstName": "Jane",
        "lastName": None,
        "jobTitle": "Data Engineer",
        "lastLogin": "2024-01-02T03:04:05Z",
        "permissions": [
            {
                "organizationId": "o1",
                "capabilities": [
                    {
                        "resourceType": "PIPELINES",
                        "action": "VIEW",
                        "filters": [{"attribute": "id", "value": "*"}],
                    }
                ],
            }
        ],
    }


@pytest.fixture
def pipeline_json():
    return {
        "id": "p1",
        "name": "prod",
        "cloudProvider": "aws",
        "collectorEndpoints": ["collector.acme.com"],
    }


@pytest.fixture
def tracker_mocks():
    """Patch the Snowplow tracker classes; ``state["accept"]`` controls the collector outcome.

    The fake ``Tracker.track`` reports through the emitter callbacks the code
    under test registered, the way the real emitter does after a send.
    """
    module = "snowplow_provider.resources.track_self_describing_event"
    with patch(f"{module}.Emitter") as emitter_cls, patch(f"{module}.Subject") as subject_cls, patch(
        f"{module}.Tracker"
    ) as tracker_cls, patch(f"{module}.SelfDescribing") as event_cls:
        state = {"accept": True}

        def track(event):
            callbacks = emitter_cls.call_args.kwargs
            if state["accept"]:
                callbacks["on_success"]([{"e": "ue"}])
            else:
                callbacks["on_failure"](0, [{"e": "ue"}])

        tracker_cls.return_value.track.side_effect = track
        yield MagicMock(emitter=emitter_cls, subject=subject_cls, tracker=tracker_cls, event=event_cls, state=state)
