"""
Abstract base sink for telemetry delivery.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging

from models.telemetry_event import TelemetryEvent


class BaseSink(ABC):
    """Abstract base class for all telemetry event sinks."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        """
        Initialize sink with its settings.

        Args:
            settings: The ``telemetry`` section of settings.yaml
        """
        self.settings = settings or {}
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def emit(self, event: TelemetryEvent) -> bool:
        """
        Deliver a finished telemetry event.

        Args:
            event: Event to deliver

        Returns:
            True if the event was delivered, False otherwise
        """
        pass

    @abstractmethod
    def get_sink_name(self) -> str:
        """
        Get the name of the delivery method.

        Returns:
            String identifier for this sink
        """
        pass

    def handle_error(self, event: TelemetryEvent, exception: Exception) -> None:
        """
        Log a delivery failure.

        Args:
            event: The event that could not be delivered
            exception: The exception that occurred
        """
        self.logger.error(
            f"Error delivering {event.name} via {self.get_sink_name()}: "
            f"{type(exception).__name__}: {str(exception)}"
        )
