"""
Sink that writes telemetry events to the application log.
"""

import json
import logging
from typing import Any, Dict, Optional

from models.telemetry_event import TelemetryEvent

from .base_sink import BaseSink


class LogSink(BaseSink):
    """Logs each event as a single JSON line."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        super().__init__(settings)
        self.event_logger = logging.getLogger('TelemetryEvents')

    def get_sink_name(self) -> str:
        return "log"

    def emit(self, event: TelemetryEvent) -> bool:
        self.event_logger.info(
            f"{event.name} {json.dumps(dict(event.properties), sort_keys=True)}"
        )
        return True
