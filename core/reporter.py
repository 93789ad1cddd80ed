"""
Telemetry Reporter - Builds source summary events and hands them to a sink.
"""

import logging
import uuid
from datetime import timedelta
from typing import Optional, Union

from core.classifier import classify_restore_sources, classify_search_sources
from core.events import (
    ParentId,
    build_restore_event,
    build_search_event,
    build_search_page_event,
)
from core.registry import SourceRegistry
from models.telemetry_event import LoadingStatus, TelemetryEvent
from sinks.base_sink import BaseSink


class TelemetryReporter:
    """Reports package source telemetry for restore and search operations."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        settings_path: Optional[str] = None,
        sink: Optional[BaseSink] = None,
        registry: Optional[SourceRegistry] = None
    ):
        """
        Initialize the reporter.

        Args:
            config_path: Path to sources.yaml
            settings_path: Path to settings.yaml
            sink: Delivery sink; defaults to the one configured in settings
            registry: Pre-built registry; config_path and settings_path are ignored if given
        """
        self.registry = registry or SourceRegistry(config_path, settings_path)
        self.sink = sink or self.registry.get_sink()
        self.logger = logging.getLogger('TelemetryReporter')

    def _emit(self, event: TelemetryEvent) -> TelemetryEvent:
        delivered = self.sink.emit(event)
        if not delivered:
            self.logger.warning(f"{event.name} was not delivered via {self.sink.get_sink_name()}")
        return event

    def report_restore_summary(self, parent_id: Optional[ParentId] = None) -> TelemetryEvent:
        """
        Classify the configured sources for restore and emit the summary.

        Args:
            parent_id: Correlation id of the restore operation; generated if omitted

        Returns:
            The RestorePackageSourceSummary event
        """
        parent_id = parent_id or uuid.uuid4()
        result = classify_restore_sources(self.registry.get_all_sources())

        self.logger.info(
            f"Restore sources: local={result.local_count}, v2={result.http_v2_count}, "
            f"v3={result.http_v3_count}, nuget.org={result.nuget_org.wire_name}"
        )
        return self._emit(build_restore_event(parent_id, result))

    def report_search_summary(self, parent_id: Optional[ParentId] = None) -> TelemetryEvent:
        """
        Classify the configured sources for search and emit the summary.

        Args:
            parent_id: Correlation id of the search operation; generated if omitted

        Returns:
            The SearchPackageSourceSummary event
        """
        parent_id = parent_id or uuid.uuid4()
        result = classify_search_sources(self.registry.get_all_sources())

        self.logger.info(
            f"Search sources: local={result.local_count}, v2={result.http_v2_count}, "
            f"v3={result.http_v3_count}, nuget.org={result.nuget_org.wire_name}, "
            f"offline={result.vs_offline_packages}, curated={result.dotnet_curated_feed}"
        )
        return self._emit(build_search_event(parent_id, result))

    def report_search_page(
        self,
        parent_id: ParentId,
        page_index: int,
        result_count: int,
        duration: Union[timedelta, float],
        loading_status: Union[LoadingStatus, str]
    ) -> TelemetryEvent:
        """Emit a SearchPage event for one fetched page of results."""
        event = build_search_page_event(parent_id, page_index, result_count, duration, loading_status)
        return self._emit(event)
