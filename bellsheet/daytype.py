from __future__ import annotations

import logging
from typing import Dict

import requests

from .config import DEFAULT_DAY_TYPE_URL
from .errors import DayTypeError

# A/B rotation letter -> day selector index
DAY_TYPE_INDEX: Dict[str, int] = {"A": 0, "B": 1}


class DayTypeClient:
    """Fetches today's A/B day type from the district calendar API."""

    def __init__(
        self,
        url: str = DEFAULT_DAY_TYPE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self) -> str:
        logger = logging.getLogger(__name__)
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DayTypeError(f"Day type request to {self.url} failed: {e}") from e
        try:
            body = response.json()
        except ValueError as e:
            raise DayTypeError(f"Day type response was not JSON: {e}") from e
        if not isinstance(body, dict) or "type" not in body:
            raise DayTypeError(f"Day type response has no 'type': {body!r}")
        logger.debug(f"Day type response: {body}")
        return str(body["type"])
