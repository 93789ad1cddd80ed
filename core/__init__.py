"""
Core package - Source classification and telemetry event construction.
"""

from core.classifier import classify_restore_sources, classify_search_sources
from core.events import (
    build_restore_event,
    build_search_event,
    build_search_page_event,
    get_search_source_summary_event,
    get_source_summary_event,
)
from core.registry import SourceRegistry
from core.reporter import TelemetryReporter

__all__ = [
    'classify_restore_sources',
    'classify_search_sources',
    'build_restore_event',
    'build_search_event',
    'build_search_page_event',
    'get_source_summary_event',
    'get_search_source_summary_event',
    'SourceRegistry',
    'TelemetryReporter',
]
