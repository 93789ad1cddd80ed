"""
Telemetry Event model.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Union


Scalar = Union[str, int, float, bool]


class LoadingStatus(Enum):
    """Loading state of a search results page."""

    Unknown = 'Unknown'
    Cancelled = 'Cancelled'
    ErrorOccurred = 'ErrorOccurred'
    Loading = 'Loading'
    NoItemsFound = 'NoItemsFound'
    NoMoreItems = 'NoMoreItems'
    Ready = 'Ready'


class TelemetryEvent:
    """
    A named, immutable set of scalar properties ready for delivery.

    The properties are copied on construction and exposed read-only.
    """

    __slots__ = ('_name', '_properties')

    def __init__(self, name: str, properties: Optional[Mapping[str, Scalar]] = None):
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_properties', MappingProxyType(dict(properties or {})))

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def properties(self) -> Mapping[str, Scalar]:
        return self._properties

    def __getitem__(self, key: str) -> Scalar:
        return self._properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def get(self, key: str, default: Any = None) -> Any:
        return self._properties.get(key, default)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TelemetryEvent):
            return NotImplemented
        return self._name == other._name and dict(self._properties) == dict(other._properties)

    def __hash__(self) -> int:
        return hash((self._name, frozenset(self._properties.items())))

    def __repr__(self) -> str:
        return f"TelemetryEvent({self._name!r}, {dict(self._properties)!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'name': self._name,
            'properties': dict(self._properties),
        }
