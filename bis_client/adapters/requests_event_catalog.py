"""Event catalog provider backed by ``requests``."""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import requests
from prometheus_client import Counter, Histogram

from ..config import Settings, load_settings
from ..errors import CatalogRequestError
from ..ports.event_catalog import EventCatalogProvider

logger = logging.getLogger(__name__)

CATALOG_REQUEST_COUNT = Counter(
    "bis_client_requests_total", "Event catalog requests", ["outcome"]
)
CATALOG_REQUEST_LATENCY = Histogram(
    "bis_client_request_duration_seconds", "Latency of event catalog requests"
)


class RequestsEventCatalogProvider(EventCatalogProvider):
    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or load_settings()
        self._session = session or requests.Session()

    @property
    def events_url(self) -> str:
        return f"{self.settings.base_url}/{self.settings.events_path}"

    def list_events(self, params: Dict[str, str]) -> List[Dict[str, Any]]:
        url = self.events_url
        logger.debug("GET %s params=%s", url, params)
        try:
            with CATALOG_REQUEST_LATENCY.time():
                response = self._session.get(url, params=params, timeout=self.settings.timeout)
                response.raise_for_status()
        except requests.RequestException as e:
            CATALOG_REQUEST_COUNT.labels(outcome="http_error").inc()
            logger.error("Event catalog request to %s failed: %s", url, e)
            raise CatalogRequestError("CATALOG_HTTP_ERROR", f"Event catalog request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            CATALOG_REQUEST_COUNT.labels(outcome="decode_error").inc()
            logger.error("Event catalog returned a non-JSON body from %s", url)
            raise CatalogRequestError("CATALOG_DECODE_ERROR", f"Event catalog returned invalid JSON: {e}") from e

        # Paginated responses wrap records in a `results` envelope
        records = payload.get("results") if isinstance(payload, dict) else payload
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            CATALOG_REQUEST_COUNT.labels(outcome="decode_error").inc()
            logger.error("Event catalog returned an unexpected body shape from %s: %.200r", url, payload)
            raise CatalogRequestError(
                "CATALOG_DECODE_ERROR", "Event catalog response is not a list of event records"
            )

        CATALOG_REQUEST_COUNT.labels(outcome="ok").inc()
        return records

    def close(self) -> None:
        self._session.close()
