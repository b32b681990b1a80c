from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from . import __version__
from .models import EventSpec, ResourceData
from .provider import SnowplowProvider
from .utils.config import API_KEY_ENV, API_KEY_ID_ENV, ORGANIZATION_ID_ENV, env_str
from .utils.http_client import ConfigurationError, ConsoleError

load_dotenv()


def _context_arg(value: str) -> EventSpec:
    iglu_uri, sep, payload = value.partition("=")
    if not sep or not iglu_uri:
        raise argparse.ArgumentTypeError("contexts must look like IGLU_URI=JSON")
    return EventSpec(iglu_uri=iglu_uri, payload=payload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snowplow-provider",
        description="Read Snowplow Console metadata and emit self-describing events.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--endpoint", default=env_str("SNOWPLOW_CONSOLE_API_ENDPOINT"), help="Console API hostname")
    parser.add_argument("--api-key", default=None, help=f"Console API key (defaults to ${API_KEY_ENV})")
    parser.add_argument("--api-key-id", default=None, help=f"Console API key id for v3 auth (defaults to ${API_KEY_ID_ENV})")
    parser.add_argument("--organization-id", default=None, help=f"Console organization id (defaults to ${ORGANIZATION_ID_ENV})")
    parser.add_argument("--collector-uri", default=env_str("SNOWPLOW_COLLECTOR_URI"), help="URI of your Snowplow Collector")
    parser.add_argument("--verbose", action="store_true", help="Log request and response details")

    commands = parser.add_subparsers(dest="command", required=True)

    schema_cmd = commands.add_parser("schema", help="Print the provider, data source or resource schema")
    schema_cmd.add_argument("name", nargs="?", help="Data source or resource name; omit for the provider schema")

    read_cmd = commands.add_parser("read", help="Read a console data source and print its state")
    read_cmd.add_argument("name", help="organization, user, users, pipeline or pipelines")
    read_cmd.add_argument("--id", dest="resource_id", help="Id of the user or pipeline to read")

    track_cmd = commands.add_parser("track", help="Emit a single self-describing event")
    track_cmd.add_argument("--iglu-uri", required=True, help="Iglu URI of the event schema")
    track_cmd.add_argument("--payload", required=True, help="Event data as a JSON string")
    track_cmd.add_argument("--context", action="append", type=_context_arg, default=[], help="Entity as IGLU_URI=JSON")
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def provider_config_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    config = {
        "console_api_endpoint": args.endpoint,
        "console_api_key": args.api_key,
        "console_api_key_id": args.api_key_id,
        "console_organization_id": args.organization_id,
        "collector_uri": args.collector_uri,
    }
    return {key: value for key, value in config.items() if value is not None}


def print_json(value: Any) -> None:
    print(json.dumps(value, indent=2, sort_keys=True))


def print_schema(provider: SnowplowProvider, name: Optional[str]) -> None:
    if not name:
        schema = provider.describe_schema()
    else:
        try:
            schema = provider.data_source(name).describe_schema()
        except ConfigurationError:
            schema = provider.resource(name).describe_schema()
    print_json(schema.model_dump(exclude_none=True))


def read_data_source(provider: SnowplowProvider, provider_data: ResourceData, name: str, resource_id: str | None) -> None:
    data_source = provider.data_source(name, provider_data)
    config: Dict[str, Any] = {}
    if resource_id:
        config["id"] = resource_id
    print_json(data_source.read(config))


def track_event(provider: SnowplowProvider, provider_data: ResourceData, iglu_uri: str, payload: str, contexts: List[EventSpec]) -> None:
    resource = provider.resource("track_self_describing_event", provider_data)
    plan: Dict[str, Any] = {"create_event": {"iglu_uri": iglu_uri, "payload": payload}}
    if contexts:
        plan["contexts"] = [context.model_dump() for context in contexts]
    state = resource.create(plan)
    logging.info("Tracked %s (id=%s)", iglu_uri, state["id"])


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    provider = SnowplowProvider()
    try:
        if args.command == "schema":
            print_schema(provider, args.name)
            return 0

        provider_data = provider.configure(provider_config_from_args(args))
        try:
            if args.command == "read":
                read_data_source(provider, provider_data, args.name, args.resource_id)
            elif args.command == "track":
                track_event(provider, provider_data, args.iglu_uri, args.payload, args.context)
        finally:
            if provider_data.client is not None:
                provider_data.client.close()
    except ConsoleError as exc:
        logging.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
