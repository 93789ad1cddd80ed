"""
Package Source model.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import SplitResult, urlsplit

from utils.text import startswith_ignore_case


@dataclass(frozen=True)
class PackageSource:
    """A configured location (URL or filesystem path) packages are retrieved from."""

    name: str
    source: str
    is_enabled: bool = True
    protocol_version: Optional[int] = None

    @property
    def is_http(self) -> bool:
        """True for http:// and https:// sources; local, UNC and file sources are not."""
        return (
            startswith_ignore_case(self.source, 'http://')
            or startswith_ignore_case(self.source, 'https://')
        )

    @property
    def try_source_as_uri(self) -> Optional[SplitResult]:
        """
        Parse the source location as an absolute URI.

        Returns:
            The split URI, or None if the location has no scheme or cannot be parsed
        """
        if not self.source:
            return None
        try:
            uri = urlsplit(self.source.strip())
            # Accessing port validates the authority component
            uri.port
        except ValueError:
            return None
        if not uri.scheme:
            return None
        return uri

    @property
    def host(self) -> Optional[str]:
        """Lower-cased host of the parsed URI, if any."""
        uri = self.try_source_as_uri
        if uri is None:
            return None
        return uri.hostname or None

    @classmethod
    def from_dict(cls, name: str, data: Any) -> 'PackageSource':
        """
        Create PackageSource from a configuration entry.

        A bare string entry is taken as the source location.
        """
        if isinstance(data, str):
            return cls(name=name, source=data)

        data = data or {}
        protocol_version = data.get('protocol_version')
        return cls(
            name=name,
            source=str(data.get('source', '')),
            is_enabled=bool(data.get('enabled', True)),
            protocol_version=int(protocol_version) if protocol_version is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a configuration entry."""
        return {
            'source': self.source,
            'enabled': self.is_enabled,
            'protocol_version': self.protocol_version,
        }
