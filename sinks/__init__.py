"""
Sinks package - Delivery methods for finished telemetry events.
"""

from sinks.base_sink import BaseSink
from sinks.log_sink import LogSink
from sinks.file_sink import FileSink
from sinks.http_sink import HTTPSink

__all__ = [
    'BaseSink',
    'LogSink',
    'FileSink',
    'HTTPSink',
]
