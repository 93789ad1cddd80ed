"""
Sink that appends telemetry events to a JSON Lines file.
"""

import json
import os
from typing import Any, Dict, Optional

from models.telemetry_event import TelemetryEvent

from .base_sink import BaseSink


class FileSink(BaseSink):
    """Appends one JSON object per event to a file."""

    DEFAULT_PATH = os.path.join('telemetry', 'events.jsonl')

    def __init__(self, settings: Optional[Dict[str, Any]] = None, file_path: Optional[str] = None):
        super().__init__(settings)
        self.file_path = file_path or self.settings.get('file_path') or self.DEFAULT_PATH

    def get_sink_name(self) -> str:
        return "file"

    def emit(self, event: TelemetryEvent) -> bool:
        """
        Append the event to the configured file.

        Returns:
            True if written, False if the file could not be written
        """
        try:
            directory = os.path.dirname(self.file_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(self.file_path, 'a', encoding='utf-8') as f:
                f.write(json.dumps(event.to_dict(), sort_keys=True))
                f.write('\n')
        except OSError as e:
            self.handle_error(event, e)
            return False

        self.logger.debug(f"Wrote {event.name} to {self.file_path}")
        return True
