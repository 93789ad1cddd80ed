"""
HTTP POST sink for a remote telemetry collector.
Endpoint and API key may come from settings or the environment (.env).
"""

import os
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv

from models.telemetry_event import TelemetryEvent

from .base_sink import BaseSink

# Load environment variables
load_dotenv()


class HTTPSink(BaseSink):
    """Posts each event as JSON to a collector endpoint."""

    def __init__(
        self,
        settings: Optional[Dict[str, Any]] = None,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None
    ):
        super().__init__(settings)
        http_settings = self.settings.get('http') or {}

        self.endpoint = (
            endpoint
            or os.getenv('TELEMETRY_ENDPOINT')
            or http_settings.get('endpoint')
        )
        self.api_key = api_key or os.getenv('TELEMETRY_API_KEY')
        self.timeout = http_settings.get('timeout', 10)
        self.max_retries = max(1, int(http_settings.get('max_retries', 3)))
        self.user_agent = http_settings.get('user_agent', 'SourceTelemetry/1.0')

        if not self.endpoint:
            self.logger.warning("No telemetry endpoint configured. Events will be dropped.")

    def get_sink_name(self) -> str:
        return "http"

    def _build_headers(self) -> Dict[str, str]:
        headers = {
            'User-Agent': self.user_agent,
            'Content-Type': 'application/json',
        }
        if self.api_key:
            headers['Authorization'] = f"Bearer {self.api_key}"
        return headers

    def emit(self, event: TelemetryEvent) -> bool:
        """
        POST the event to the collector, retrying on transport errors.

        Returns:
            True if the collector accepted the event, False otherwise
        """
        if not self.endpoint:
            return False

        for attempt in range(self.max_retries):
            try:
                self.logger.debug(f"Posting {event.name} to {self.endpoint} (attempt {attempt + 1})")
                response = requests.post(
                    self.endpoint,
                    json=event.to_dict(),
                    headers=self._build_headers(),
                    timeout=self.timeout
                )
                response.raise_for_status()
                return True

            except requests.exceptions.RequestException as e:
                self.logger.warning(f"Attempt {attempt + 1} failed: {e}")
                if attempt == self.max_retries - 1:
                    self.handle_error(event, e)

        return False
