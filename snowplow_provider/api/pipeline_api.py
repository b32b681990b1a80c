"""API client for pipelines owned by the configured organization."""

from __future__ import annotations

import logging
from typing import List

from ..models import Pipeline
from ..utils.http_client import ConsoleError, HttpClient
from .decoding import decode_record, decode_records
from .paths import organization_path

PIPELINES_PATH = "/resources/v1/pipelines"


class PipelineAPI:
    """Fetches pipeline resources, singly or as a list."""

    def __init__(self, http_client: HttpClient, organization_id: str) -> None:
        self._client = http_client
        self._organization_id = organization_id

    def get_pipeline(self, pipeline_id: str) -> Pipeline:
        path = organization_path(self._organization_id, f"{PIPELINES_PATH}/{pipeline_id}")
        try:
            body = self._client.get(path)
        except ConsoleError as exc:
            logging.error("Failed to fetch pipeline %s: %s", pipeline_id, exc)
            raise
        return decode_record(Pipeline, body)

    def get_pipelines(self) -> List[Pipeline]:
        path = organization_path(self._organization_id, PIPELINES_PATH)
        try:
            body = self._client.get(path)
        except ConsoleError as exc:
            logging.error("Failed to fetch pipelines: %s", exc)
            raise
        return decode_records(Pipeline, body)
