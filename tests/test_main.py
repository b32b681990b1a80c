"""
Tests for the command line harness.
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from snowplow_provider import main as cli
from snowplow_provider.api.console_client import ConsoleClient
from snowplow_provider.models import Pipeline, ProviderConfig, ResourceData
from snowplow_provider.utils.http_client import ApiError, AuthenticationError

CONFIGURE = "snowplow_provider.provider.SnowplowProvider.configure"


@pytest.fixture
def console_client():
    return MagicMock(spec=ConsoleClient)


@pytest.fixture
def configured(console_client):
    """Patch provider configuration to hand out ``console_client``."""
    provider_data = ResourceData(config=ProviderConfig(collector_uri="collector.acme.com"), client=console_client)
    with patch(CONFIGURE, return_value=provider_data) as configure:
        yield configure


class TestSchemaCommand:
    def test_provider_schema(self, capsys):
        assert cli.main(["schema"]) == 0

        schema = json.loads(capsys.readouterr().out)
        assert schema["description"] == "Terraform provider for emitting Snowplow events"
        assert "console_api_key" in schema["attributes"]

    def test_data_source_schema(self, capsys):
        assert cli.main(["schema", "pipeline"]) == 0

        schema = json.loads(capsys.readouterr().out)
        assert schema["attributes"]["id"]["required"] is True

    def test_resource_schema(self, capsys):
        assert cli.main(["schema", "snowplow_track_self_describing_event"]) == 0

        schema = json.loads(capsys.readouterr().out)
        assert "create_event" in schema["attributes"]

    def test_unknown_schema(self):
        assert cli.main(["schema", "projects"]) == 1


class TestReadCommand:
    def test_read_without_credentials_fails(self):
        assert cli.main(["read", "users"]) == 1

    def test_authentication_failure_is_reported(self):
        with patch(CONFIGURE, side_effect=AuthenticationError("nope")):
            assert cli.main(["--api-key", "s1", "read", "users"]) == 1

    def test_read_pipeline_prints_state(self, configured, console_client, capsys):
        console_client.get_pipeline.return_value = Pipeline(
            id="p1", name="prod", cloud_provider="aws", collector_endpoints=["collector.acme.com"]
        )

        assert cli.main(["--api-key", "s1", "--organization-id", "o1", "read", "pipeline", "--id", "p1"]) == 0

        console_client.get_pipeline.assert_called_once_with("p1")
        assert json.loads(capsys.readouterr().out) == {
            "id": "p1",
            "name": "prod",
            "cloud_provider": "aws",
            "collector_endpoints": ["collector.acme.com"],
        }
        assert configured.call_args.args[0] == {"console_api_key": "s1", "console_organization_id": "o1"}
        console_client.close.assert_called_once_with()

    def test_client_closed_when_read_fails(self, configured, console_client):
        console_client.get_pipelines.side_effect = ApiError("boom", status_code=500)

        assert cli.main(["--api-key", "s1", "read", "pipelines"]) == 1
        console_client.close.assert_called_once_with()


class TestTrackCommand:
    def test_track_emits_create_event(self, configured, console_client, tracker_mocks):
        argv = [
            "--api-key",
            "s1",
            "track",
            "--iglu-uri",
            "iglu:com.acme/deploy/jsonschema/1-0-0",
            "--payload",
            '{"version": "1.2.3"}',
            "--context",
            'iglu:com.acme/env/jsonschema/1-0-0={"name": "prod"}',
        ]

        assert cli.main(argv) == 0

        assert tracker_mocks.emitter.call_args.args[0] == "collector.acme.com"
        event_json = tracker_mocks.event.call_args.args[0]
        assert event_json.schema == "iglu:com.acme/deploy/jsonschema/1-0-0"
        assert event_json.data == {"version": "1.2.3"}
        contexts = tracker_mocks.event.call_args.kwargs["context"]
        assert [(c.schema, c.data) for c in contexts] == [("iglu:com.acme/env/jsonschema/1-0-0", {"name": "prod"})]
        console_client.close.assert_called_once_with()

    def test_rejected_event_exits_nonzero(self, configured, console_client, tracker_mocks):
        tracker_mocks.state["accept"] = False

        argv = ["track", "--iglu-uri", "iglu:com.acme/deploy/jsonschema/1-0-0", "--payload", "{}"]
        assert cli.main(argv) == 1
        console_client.close.assert_called_once_with()


class TestArguments:
    def test_provider_config_only_includes_given_flags(self):
        args = cli.build_parser().parse_args(["--api-key", "s1", "--organization-id", "o1", "read", "users"])

        assert cli.provider_config_from_args(args) == {"console_api_key": "s1", "console_organization_id": "o1"}

    def test_context_argument(self):
        args = cli.build_parser().parse_args(
            ["track", "--iglu-uri", "iglu:a/b/jsonschema/1-0-0", "--payload", "{}", "--context", "iglu:c/d/jsonschema/1-0-0={\"x\":1}"]
        )

        assert args.context[0].iglu_uri == "iglu:c/d/jsonschema/1-0-0"
        assert args.context[0].payload == '{"x":1}'
