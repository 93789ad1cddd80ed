"""
Telemetry event construction.

Property names are the wire contract with the telemetry backend.
"""

from datetime import timedelta
from typing import Iterable, Optional, Union
from uuid import UUID

from core.classifier import classify_restore_sources, classify_search_sources
from models.classification import ClassificationResult, SearchClassificationResult
from models.source import PackageSource
from models.telemetry_event import LoadingStatus, TelemetryEvent


RESTORE_SUMMARY_EVENT = 'RestorePackageSourceSummary'
SEARCH_SUMMARY_EVENT = 'SearchPackageSourceSummary'
SEARCH_PAGE_EVENT = 'SearchPage'

ParentId = Union[UUID, str]


def build_restore_event(parent_id: ParentId, result: ClassificationResult) -> TelemetryEvent:
    """Build a RestorePackageSourceSummary event from a restore classification."""
    return TelemetryEvent(RESTORE_SUMMARY_EVENT, {
        'NumLocalFeeds': result.local_count,
        'NumHTTPv2Feeds': result.http_v2_count,
        'NumHTTPv3Feeds': result.http_v3_count,
        'NuGetOrg': result.nuget_org.wire_name,
        'ParentId': str(parent_id),
    })


def build_search_event(parent_id: ParentId, result: SearchClassificationResult) -> TelemetryEvent:
    """Build a SearchPackageSourceSummary event from a search classification."""
    return TelemetryEvent(SEARCH_SUMMARY_EVENT, {
        'NumLocalFeeds': result.local_count,
        'NumHTTPv2Feeds': result.http_v2_count,
        'NumHTTPv3Feeds': result.http_v3_count,
        'NuGetOrg': result.nuget_org.wire_name,
        'VsOfflinePackages': result.vs_offline_packages,
        'DotnetCuratedFeed': result.dotnet_curated_feed,
        'ParentId': str(parent_id),
    })


def build_search_page_event(
    parent_id: ParentId,
    page_index: int,
    result_count: int,
    duration: Union[timedelta, float],
    loading_status: Union[LoadingStatus, str]
) -> TelemetryEvent:
    """
    Build a SearchPage event for one fetched page of search results.

    Args:
        parent_id: Correlation id of the search operation
        page_index: Zero-based index of the fetched page
        result_count: Number of results on the page
        duration: Time taken to fetch the page
        loading_status: Loading state after the fetch

    Returns:
        SearchPage TelemetryEvent
    """
    if isinstance(duration, timedelta):
        duration = duration.total_seconds()
    if isinstance(loading_status, LoadingStatus):
        loading_status = loading_status.name

    return TelemetryEvent(SEARCH_PAGE_EVENT, {
        'ParentId': str(parent_id),
        'PageIndex': page_index,
        'ResultCount': result_count,
        'Duration': float(duration),
        'LoadingStatus': str(loading_status),
    })


def get_source_summary_event(
    parent_id: ParentId,
    sources: Optional[Iterable[PackageSource]]
) -> TelemetryEvent:
    """Create a restore summary event with counts of local vs http and v2 vs v3 feeds."""
    return build_restore_event(parent_id, classify_restore_sources(sources))


def get_search_source_summary_event(
    parent_id: ParentId,
    sources: Optional[Iterable[PackageSource]]
) -> TelemetryEvent:
    """Create a search summary event with counts of local vs http and v2 vs v3 feeds."""
    return build_search_event(parent_id, classify_search_sources(sources))
