"""
Fetch raw recruitment rows from the external records API.

The API serves one table per location and recruitment feed:

    GET <base_url>?table_name=Dev-Bsc-Baltimore-Staff-Inbound-Call-Recruitment

and answers with a JSON array of snake_case rows.
"""
import logging
from enum import Enum
from typing import Any, Dict, List

import requests

from care_analytics.exceptions import SourceError
from care_analytics.normalization import NormalizationResult, RecordKind, normalize_records

logger = logging.getLogger(__name__)

LOCATIONS = ("baltimore", "pittsburgh")


class RecruitmentKind(Enum):
    """Recruitment feeds served by the records API."""
    CALL = "call"
    TEXT = "text"
    FORM = "form"
    CUSTOMER_CALL = "customer_call"

    @property
    def record_kind(self) -> RecordKind:
        if self is RecruitmentKind.FORM:
            return RecordKind.FORM
        if self is RecruitmentKind.CUSTOMER_CALL:
            return RecordKind.CUSTOMER
        return RecordKind.CANDIDATE


_TABLE_PATTERNS = {
    RecruitmentKind.CALL: "Dev-Bsc-{location}-Staff-Inbound-Call-Recruitment",
    RecruitmentKind.TEXT: "Dev-Bsc-{location}-Staff-Inbound-Text-Recruitment",
    RecruitmentKind.FORM: "Dev-BSC-{location}-Staff-Inbound-Form-Recruitment",
    RecruitmentKind.CUSTOMER_CALL: "Dev-Bsc-{location}-Customer-Inbound-Call-Recruitment",
}


def recruitment_table_name(location: str, kind: RecruitmentKind) -> str:
    """
    Table name for one location and recruitment feed.

    Raises:
        ValueError: If the location is not served by the API
    """
    location = location.strip().lower()
    if location not in LOCATIONS:
        raise ValueError(f"Invalid location {location!r}. Must be one of: {', '.join(LOCATIONS)}")
    return _TABLE_PATTERNS[kind].format(location=location.capitalize())


class RecordsApiClient:
    """Blocking client for the records API."""

    def __init__(self, base_url: str, timeout: float = 10.0):
        if not base_url:
            raise ValueError("Records API base URL is not configured")
        self.base_url = base_url
        self.timeout = timeout

    def fetch_rows(self, table_name: str) -> List[Dict[str, Any]]:
        """
        Fetch every row of one table.

        Raises:
            SourceError: On network failure, a non-2xx response or a payload
                that is not a JSON array
        """
        logger.info("Fetching %s from %s", table_name, self.base_url)

        try:
            response = requests.get(
                self.base_url,
                params={"table_name": table_name},
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Records API request for %s failed: %s", table_name, e)
            raise SourceError(f"Failed to fetch data from records API: {e}") from e

        if not response.ok:
            logger.error("Records API returned %d for %s", response.status_code, table_name)
            raise SourceError("Records API request failed", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Records API returned invalid JSON for %s", table_name)
            raise SourceError("Invalid response format from records API") from e

        if not isinstance(data, list):
            logger.error("Records API returned %s instead of a list for %s", type(data).__name__, table_name)
            raise SourceError("Invalid response format from records API")

        logger.info("Fetched %d row(s) from %s", len(data), table_name)
        return data


def fetch_records(client: RecordsApiClient, location: str, kind: RecruitmentKind) -> NormalizationResult:
    """Fetch one recruitment feed and normalize its rows into canonical records."""
    rows = client.fetch_rows(recruitment_table_name(location, kind))
    return normalize_records(kind.record_kind, rows)
