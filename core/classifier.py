"""
Source classification for restore and search telemetry.

Both classifiers walk the enabled sources once and sort each into exactly one
of three buckets: local, HTTP v2 or HTTP v3. They differ in how nuget.org is
reported and in the extra detections search performs.
"""

from typing import Iterable, Optional

from core.detectors import (
    is_dotnet_curated_feed,
    is_http_nuget_org_domain_or_subdomain,
    is_http_nuget_org_subdomain,
    is_http_v3,
    is_vs_offline_packages,
)
from models.classification import (
    ClassificationResult,
    RestoreNuGetOrgStyle,
    SearchClassificationResult,
    SearchNuGetOrgStyle,
)
from models.source import PackageSource


def classify_restore_sources(
    sources: Optional[Iterable[PackageSource]]
) -> ClassificationResult:
    """
    Count local vs http and v2 vs v3 sources for a restore operation.

    nuget.org is reported as the best protocol it is configured with; once a
    v3 nuget.org source is seen, v2 nuget.org sources no longer affect it.

    Args:
        sources: Configured package sources, or None

    Returns:
        ClassificationResult for the enabled sources
    """
    local = 0
    http_v2 = 0
    http_v3 = 0
    has_nuget_org_v3 = False
    nuget_org = RestoreNuGetOrgStyle.NotPresent

    for source in sources or ():
        # Ignore disabled sources
        if not source.is_enabled:
            continue

        if source.is_http:
            if is_http_v3(source):
                http_v3 += 1

                if is_http_nuget_org_subdomain(source):
                    has_nuget_org_v3 = True
                    nuget_org = RestoreNuGetOrgStyle.YesV3
            else:
                http_v2 += 1

                # Prefer v3 over v2 if v3 is found
                if not has_nuget_org_v3 and is_http_nuget_org_subdomain(source):
                    nuget_org = RestoreNuGetOrgStyle.YesV2
        else:
            # Local or UNC feed
            local += 1

    return ClassificationResult(
        local_count=local,
        http_v2_count=http_v2,
        http_v3_count=http_v3,
        nuget_org=nuget_org,
    )


def classify_search_sources(
    sources: Optional[Iterable[PackageSource]]
) -> SearchClassificationResult:
    """
    Count local vs http and v2 vs v3 sources for a search operation.

    nuget.org is reported as the set of protocols it is configured with. The
    dotnet curated feed is detected separately and kept out of that set. Local
    sources are checked against the offline package cache.

    Args:
        sources: Configured package sources, or None

    Returns:
        SearchClassificationResult for the enabled sources
    """
    local = 0
    http_v2 = 0
    http_v3 = 0
    nuget_org = SearchNuGetOrgStyle.NotPresent
    vs_offline_packages = False
    dotnet_curated_feed = False

    for source in sources or ():
        if not source.is_enabled:
            continue

        if source.is_http:
            if is_http_v3(source):
                http_v3 += 1

                if is_http_nuget_org_domain_or_subdomain(source):
                    nuget_org |= SearchNuGetOrgStyle.YesV3
            else:
                http_v2 += 1

                if is_http_nuget_org_domain_or_subdomain(source):
                    if is_dotnet_curated_feed(source):
                        dotnet_curated_feed = True
                    else:
                        nuget_org |= SearchNuGetOrgStyle.YesV2
        else:
            local += 1

            if is_vs_offline_packages(source):
                vs_offline_packages = True

    return SearchClassificationResult(
        local_count=local,
        http_v2_count=http_v2,
        http_v3_count=http_v3,
        nuget_org=nuget_org,
        vs_offline_packages=vs_offline_packages,
        dotnet_curated_feed=dotnet_curated_feed,
    )
