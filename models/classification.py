"""
Classification result models.

Restore and search report the primary registry (nuget.org) differently, so
each gets its own tag type: restore keeps the single best protocol seen,
search keeps the set of protocols seen.
"""

from dataclasses import dataclass
from enum import Enum, Flag


class RestoreNuGetOrgStyle(Enum):
    """Best protocol nuget.org was configured with, v3 preferred."""

    NotPresent = 'NotPresent'
    YesV2 = 'YesV2'
    YesV3 = 'YesV3'

    @property
    def wire_name(self) -> str:
        return self.name


class SearchNuGetOrgStyle(Flag):
    """Set of protocols nuget.org was configured with."""

    NotPresent = 0
    YesV2 = 1
    YesV3 = 2
    YesV3AndV2 = YesV3 | YesV2

    @property
    def wire_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClassificationResult:
    """Source counts for a restore operation."""

    local_count: int = 0
    http_v2_count: int = 0
    http_v3_count: int = 0
    nuget_org: RestoreNuGetOrgStyle = RestoreNuGetOrgStyle.NotPresent

    @property
    def total_count(self) -> int:
        """Number of enabled sources that were classified."""
        return self.local_count + self.http_v2_count + self.http_v3_count


@dataclass(frozen=True)
class SearchClassificationResult:
    """Source counts and special source detections for a search operation."""

    local_count: int = 0
    http_v2_count: int = 0
    http_v3_count: int = 0
    nuget_org: SearchNuGetOrgStyle = SearchNuGetOrgStyle.NotPresent
    vs_offline_packages: bool = False
    dotnet_curated_feed: bool = False

    @property
    def total_count(self) -> int:
        """Number of enabled sources that were classified."""
        return self.local_count + self.http_v2_count + self.http_v3_count
