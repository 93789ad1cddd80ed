#!/usr/bin/env python3
"""
CLI to summarize configured package sources as telemetry events.

Usage:
    python main.py list                       # List configured sources
    python main.py restore                    # Emit a RestorePackageSourceSummary event
    python main.py search --sink file         # Emit a SearchPackageSourceSummary event to a file
    python main.py search --parent-id <uuid>  # Correlate with an existing operation
"""

import argparse
import json
import sys
import uuid
from typing import List, Optional

from core.detectors import is_http_v3
from core.registry import SourceRegistry
from core.reporter import TelemetryReporter
from models.errors import ConfigurationError
from models.source import PackageSource
from utils.logger import setup_logging_from_settings


def describe_source(source: PackageSource) -> str:
    """Short kind label used by the list command."""
    if not source.is_http:
        return 'local'
    return 'HTTP v3' if is_http_v3(source) else 'HTTP v2'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Package source telemetry summaries'
    )
    parser.add_argument(
        'command',
        choices=['list', 'restore', 'search'],
        help='list sources, or emit the restore or search summary event'
    )
    parser.add_argument(
        '--sources',
        type=str,
        help='Path to sources.yaml (default: config/sources.yaml)'
    )
    parser.add_argument(
        '--settings',
        type=str,
        help='Path to settings.yaml (default: config/settings.yaml)'
    )
    parser.add_argument(
        '--parent-id',
        type=str,
        help='Correlation id of the parent operation (generated if omitted)'
    )
    parser.add_argument(
        '--sink',
        choices=sorted(SourceRegistry.SINK_MAP),
        help='Override the configured telemetry sink'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    parent_id = None
    if args.parent_id:
        try:
            parent_id = uuid.UUID(args.parent_id)
        except ValueError:
            print(f"Invalid --parent-id: {args.parent_id}", file=sys.stderr)
            return 1

    try:
        registry = SourceRegistry(args.sources, args.settings)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging_from_settings(
        registry.get_settings(),
        level_override='DEBUG' if args.verbose else None
    )

    if args.command == 'list':
        print("\nConfigured Package Sources:")
        print("-" * 50)
        for source in registry.get_all_sources():
            state = 'enabled' if source.is_enabled else 'disabled'
            print(f"  {source.name}")
            print(f"    Source: {source.source}")
            print(f"    Kind:   {describe_source(source)} ({state})")
            print()
        return 0

    reporter = TelemetryReporter(
        registry=registry,
        sink=registry.get_sink(args.sink)
    )

    if args.command == 'restore':
        event = reporter.report_restore_summary(parent_id)
    else:
        event = reporter.report_search_summary(parent_id)

    print(json.dumps(event.to_dict(), indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
