"""
Source Registry - Loads package source configuration and telemetry settings.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Type

import yaml

from models.errors import ConfigurationError
from models.source import PackageSource
from sinks.base_sink import BaseSink
from sinks.file_sink import FileSink
from sinks.http_sink import HTTPSink
from sinks.log_sink import LogSink


class SourceRegistry:
    """Registry that manages package source configuration and sink instantiation."""

    # Map sink names to sink classes
    SINK_MAP: Dict[str, Type[BaseSink]] = {
        'log': LogSink,
        'file': FileSink,
        'http': HTTPSink,
    }

    def __init__(self, config_path: Optional[str] = None, settings_path: Optional[str] = None):
        """
        Initialize the registry with configuration files.

        Args:
            config_path: Path to sources.yaml
            settings_path: Path to settings.yaml

        Raises:
            ConfigurationError: If a file parses but is not shaped as expected
        """
        self.logger = logging.getLogger('SourceRegistry')
        self.base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

        if config_path is None:
            config_path = os.path.join(self.base_dir, 'config', 'sources.yaml')
        if settings_path is None:
            settings_path = os.path.join(self.base_dir, 'config', 'settings.yaml')

        self.config_path = config_path
        self.settings_path = settings_path

        self.sources = self._parse_sources(self._load_config(config_path))
        self.settings = self._load_config(settings_path)

    def _load_config(self, path: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.logger.warning(f"Config file not found: {path}")
            return {}
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing YAML file {path}: {e}")
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping at the top of {path}")
        return data

    def _parse_sources(self, data: Dict[str, Any]) -> Dict[str, PackageSource]:
        """Build PackageSource objects, keeping file order."""
        if 'sources' in data:
            entries = data['sources'] or {}
        else:
            entries = data

        if not isinstance(entries, dict):
            raise ConfigurationError(f"'sources' must be a mapping in {self.config_path}")

        sources = {}
        for name, entry in entries.items():
            if entry is not None and not isinstance(entry, (dict, str)):
                raise ConfigurationError(f"Invalid entry for source '{name}' in {self.config_path}")
            try:
                sources[str(name)] = PackageSource.from_dict(str(name), entry)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid entry for source '{name}': {e}") from e
        return sources

    def get_source(self, name: str) -> Optional[PackageSource]:
        """
        Get a package source by name.

        Args:
            name: Source name as configured

        Returns:
            PackageSource or None
        """
        return self.sources.get(name)

    def get_all_sources(self) -> List[PackageSource]:
        """Get all configured sources, enabled or not, in file order."""
        return list(self.sources.values())

    def get_enabled_sources(self) -> List[PackageSource]:
        """Get the enabled sources in file order."""
        return [source for source in self.sources.values() if source.is_enabled]

    def list_sources(self) -> List[str]:
        """List all configured source names."""
        return list(self.sources.keys())

    def get_settings(self) -> Dict[str, Any]:
        """Get application settings."""
        return self.settings

    def get_telemetry_settings(self) -> Dict[str, Any]:
        """Get the ``telemetry`` section of the settings."""
        return self.settings.get('telemetry') or {}

    def get_sink(self, sink_name: Optional[str] = None) -> BaseSink:
        """
        Get the configured telemetry sink.

        Args:
            sink_name: Overrides the configured sink name

        Returns:
            Sink instance; unknown names fall back to the log sink
        """
        telemetry_settings = self.get_telemetry_settings()
        sink_name = sink_name or telemetry_settings.get('sink', 'log')

        sink_class = self.SINK_MAP.get(sink_name)
        if not sink_class:
            self.logger.warning(f"Unknown sink '{sink_name}', using log sink")
            sink_class = LogSink

        return sink_class(telemetry_settings)
