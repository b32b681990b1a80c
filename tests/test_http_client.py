"""
Tests for the console transport: headers, URL building and response checks.
"""

import pytest
import requests

from snowplow_provider.utils.http_client import (
    ApiError,
    AuthenticationError,
    HttpClient,
    MalformedResponseError,
    TransportError,
)

from conftest import make_response


@pytest.fixture
def client(session):
    return HttpClient(version="1.2.3", host="console.example.com", session=session)


class TestRequestBuilding:
    def test_base_url_appends_api_prefix(self, client):
        assert client.base_url == "console.example.com/api/msc/v1"

    def test_get_uses_https_and_version_header(self, client, session):
        session.get.return_value = make_response(200, [])

        client.get("/organizations")

        url = session.get.call_args.args[0]
        headers = session.get.call_args.kwargs["headers"]
        assert url == "https://console.example.com/api/msc/v1/organizations"
        assert headers["X-SNOWPLOW-TERRAFORM"] == "1.2.3"
        assert "Authorization" not in headers

    def test_bearer_token_attached_once_set(self, client, session):
        session.get.return_value = make_response(200, {})
        client.set_access_token("tok")

        client.get("/organizations")

        assert session.get.call_args.kwargs["headers"]["Authorization"] == "Bearer tok"
        assert client.is_authenticated

    def test_extra_headers_are_merged(self, client, session):
        session.get.return_value = make_response(200, {})

        client.get("/x", headers={"X-API-KEY": "secret"})

        headers = session.get.call_args.kwargs["headers"]
        assert headers["X-API-KEY"] == "secret"
        assert headers["X-SNOWPLOW-TERRAFORM"] == "1.2.3"

    def test_no_timeout_by_default(self, client, session):
        session.get.return_value = make_response(200, {})

        client.get("/x")

        assert session.get.call_args.kwargs["timeout"] is None

    def test_token_can_only_be_set_once(self, client):
        client.set_access_token("tok")
        with pytest.raises(AuthenticationError):
            client.set_access_token("other")


class TestResponseHandling:
    def test_ok_json_body_returned_verbatim(self, client, session):
        session.get.return_value = make_response(200, b'{"a": 1}')

        assert client.get("/x") == b'{"a": 1}'

    @pytest.mark.parametrize("body", [b"not json", b"{", b""])
    def test_ok_with_invalid_json_is_malformed(self, client, session, body):
        session.get.return_value = make_response(200, body)

        with pytest.raises(MalformedResponseError):
            client.get("/x")

    def test_error_envelope_populates_api_error(self, client, session):
        session.get.return_value = make_response(403, {"message": "forbidden", "traceId": "trace-1"})

        with pytest.raises(ApiError) as excinfo:
            client.get("/x")

        assert excinfo.value.message == "forbidden"
        assert excinfo.value.trace_id == "trace-1"
        assert excinfo.value.status_code == 403
        assert "forbidden" in str(excinfo.value)

    def test_empty_error_body_reports_status(self, client, session):
        session.get.return_value = make_response(502, b"")

        with pytest.raises(ApiError) as excinfo:
            client.get("/x")

        assert excinfo.value.message == "unknown error"
        assert excinfo.value.status_code == 502
        assert excinfo.value.trace_id is None

    def test_unparseable_error_body_kept_as_message(self, client, session):
        session.get.return_value = make_response(500, b"upstream exploded")

        with pytest.raises(ApiError) as excinfo:
            client.get("/x")

        assert excinfo.value.message == "upstream exploded"
        assert excinfo.value.status_code == 500

    def test_network_failure_is_transport_error(self, client, session):
        session.get.side_effect = requests.ConnectionError("boom")

        with pytest.raises(TransportError) as excinfo:
            client.get("/x")

        assert isinstance(excinfo.value.__cause__, requests.ConnectionError)

    def test_context_manager_closes_session(self, session):
        with HttpClient(version="v", host="h", session=session):
            pass
        session.close.assert_called_once()
