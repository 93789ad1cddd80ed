"""
Predicates that classify a single package source.

All predicates are pure and fail soft: a source whose location cannot be
parsed simply does not match.
"""

from models.source import PackageSource
from utils.paths import expected_offline_packages_path, trim_trailing_separators
from utils.text import (
    contains_ignore_case,
    endswith_ignore_case,
    equals_ignore_case,
)


NUGET_ORG_DOMAIN = 'nuget.org'
V3_INDEX_SUFFIX = 'index.json'
V3_PROTOCOL_VERSION = 3
DOTNET_CURATED_FEED_PATH = 'api/v2/curated-feeds/microsoftdotnet'


def is_http_v3(source: PackageSource) -> bool:
    """True if the source is http and ends with index.json or is configured as protocol v3."""
    return source.is_http and (
        endswith_ignore_case(source.source, V3_INDEX_SUFFIX)
        or source.protocol_version == V3_PROTOCOL_VERSION
    )


def is_http_nuget_org_subdomain(source: PackageSource) -> bool:
    """True if the source is http and has a *.nuget.org host (bare nuget.org excluded)."""
    return source.is_http and endswith_ignore_case(source.host, '.' + NUGET_ORG_DOMAIN)


def is_http_nuget_org_domain_or_subdomain(source: PackageSource) -> bool:
    """True if the source is http and has a nuget.org or *.nuget.org host."""
    if not source.is_http:
        return False

    host = source.host
    if host is None:
        return False

    return (
        equals_ignore_case(host, NUGET_ORG_DOMAIN)
        or endswith_ignore_case(host, '.' + NUGET_ORG_DOMAIN)
    )


def is_dotnet_curated_feed(source: PackageSource) -> bool:
    """True if the source location points at the microsoftdotnet curated feed."""
    return contains_ignore_case(source.source, DOTNET_CURATED_FEED_PATH)


def is_vs_offline_packages(source: PackageSource) -> bool:
    """True if a local source is the offline package cache under Program Files."""
    if source.is_http:
        return False

    expected = expected_offline_packages_path()
    if expected is None:
        return False

    return equals_ignore_case(
        trim_trailing_separators(expected),
        trim_trailing_separators(source.source),
    )
