"""Oura API v2 client for health data retrieval."""

import logging
import re
from datetime import date, timedelta
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from oura_cli.errors import DecodeError, InvalidEndpointError, TransportError, UpstreamError
from oura_cli.models import (
    METRIC_MODELS,
    ApiResponse,
    DailyActivity,
    DailyReadiness,
    DailySleep,
    DailyStress,
    OuraModel,
    SleepPeriod,
)

# API endpoints
DEFAULT_BASE_URL = "https://api.ouraring.com"
COLLECTION_PATH = "/v2/usercollection/{endpoint}"
# Endpoint names are single path segments such as daily_sleep or vO2_max
ENDPOINT_PATTERN = re.compile(r"[A-Za-z0-9_]+")

log = logging.getLogger(__name__)


class OuraClient:
    """Client for the Oura v2 usercollection API."""

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: Oura personal access token
            base_url: API root (defaults to https://api.ouraring.com)
            timeout: Connect/read timeout in seconds
            transport: Custom httpx transport (used by tests)
        """
        self.token = token
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._http = httpx.Client(timeout=timeout, follow_redirects=False, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the HTTP client."""
        self._http.close()

    def _get_headers(self) -> dict:
        """Get headers for API requests."""
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
        }

    @staticmethod
    def _date_params(start_date: date, end_date: date) -> dict:
        """
        Build start_date/end_date query parameters.

        The API treats end_date as inclusive on some endpoints and exclusive on
        others, so end_date is always sent one day past the requested end.
        Callers get at least the requested range and must key results by day.
        """
        return {
            "start_date": start_date.isoformat(),
            "end_date": (end_date + timedelta(days=1)).isoformat(),
        }

    def _get(self, endpoint: str, start_date: date, end_date: date) -> httpx.Response:
        """Issue a single GET against a usercollection endpoint."""
        if not ENDPOINT_PATTERN.fullmatch(endpoint):
            raise InvalidEndpointError(endpoint)
        url = self.base_url + COLLECTION_PATH.format(endpoint=endpoint)
        params = self._date_params(start_date, end_date)
        log.debug("GET %s %s", url, params)

        try:
            response = self._http.get(url, params=params, headers=self._get_headers())
        except httpx.TransportError as e:
            raise TransportError(f"Failed to reach Oura API: {e}") from e

        log.debug("%s -> %s", endpoint, response.status_code)
        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)
        return response

    def fetch_range(self, endpoint: str, start_date: date, end_date: date) -> list[OuraModel]:
        """
        Fetch typed records for a metric family over a date range.

        Args:
            endpoint: Metric family (daily_sleep, daily_readiness, daily_activity,
                daily_stress or sleep)
            start_date: First requested day
            end_date: Last requested day (inclusive)

        Returns:
            Records covering at least the requested range
        """
        model = METRIC_MODELS.get(endpoint)
        if model is None:
            raise ValueError(f"Unknown metric family: {endpoint}")

        response = self._get(endpoint, start_date, end_date)
        try:
            envelope = ApiResponse[model].model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"Failed to parse {endpoint} response: {e}") from e
        log.debug("%s: %d record(s)", endpoint, len(envelope.data))
        return envelope.data

    def fetch_one(self, endpoint: str, day: date) -> list[OuraModel]:
        """Fetch typed records for a single day."""
        return self.fetch_range(endpoint, day, day)

    def raw(self, endpoint: str, day: date) -> Any:
        """Fetch any endpoint for a day and return the decoded JSON untouched."""
        response = self._get(endpoint, day, day)
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Failed to parse {endpoint} response: {e}") from e

    def daily_sleep(self, day: date) -> list[DailySleep]:
        return self.fetch_one("daily_sleep", day)

    def daily_readiness(self, day: date) -> list[DailyReadiness]:
        return self.fetch_one("daily_readiness", day)

    def daily_activity(self, day: date) -> list[DailyActivity]:
        return self.fetch_one("daily_activity", day)

    def daily_stress(self, day: date) -> list[DailyStress]:
        return self.fetch_one("daily_stress", day)

    def sleep(self, day: date) -> list[SleepPeriod]:
        return self.fetch_one("sleep", day)

    def daily_sleep_range(self, start_date: date, end_date: date) -> list[DailySleep]:
        return self.fetch_range("daily_sleep", start_date, end_date)

    def daily_readiness_range(self, start_date: date, end_date: date) -> list[DailyReadiness]:
        return self.fetch_range("daily_readiness", start_date, end_date)

    def daily_activity_range(self, start_date: date, end_date: date) -> list[DailyActivity]:
        return self.fetch_range("daily_activity", start_date, end_date)
