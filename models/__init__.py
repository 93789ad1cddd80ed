"""
Models package - Data classes for the application.
"""

from models.source import PackageSource
from models.classification import (
    ClassificationResult,
    RestoreNuGetOrgStyle,
    SearchClassificationResult,
    SearchNuGetOrgStyle,
)
from models.telemetry_event import LoadingStatus, TelemetryEvent
from models.errors import ConfigurationError, PackageAlreadyInstalledError

__all__ = [
    'PackageSource',
    'ClassificationResult',
    'RestoreNuGetOrgStyle',
    'SearchClassificationResult',
    'SearchNuGetOrgStyle',
    'LoadingStatus',
    'TelemetryEvent',
    'ConfigurationError',
    'PackageAlreadyInstalledError',
]
