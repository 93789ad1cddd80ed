"""
Tests for telemetry sinks.
"""

import json
import logging

import pytest
import requests
from unittest.mock import Mock, patch
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.telemetry_event import TelemetryEvent
from sinks.file_sink import FileSink
from sinks.http_sink import HTTPSink
from sinks.log_sink import LogSink


@pytest.fixture
def event():
    return TelemetryEvent('RestorePackageSourceSummary', {
        'ParentId': '6f1c2a3b-4d5e-4f60-8a9b-0c1d2e3f4a5b',
        'NumLocalFeeds': 1,
        'NumHTTPv2Feeds': 0,
        'NumHTTPv3Feeds': 1,
        'NuGetOrg': 'YesV3',
    })


class TestLogSink:
    """Tests for the log sink."""

    def test_get_sink_name(self):
        assert LogSink().get_sink_name() == 'log'

    def test_emit_logs_event(self, event, caplog):
        caplog.set_level(logging.INFO, logger='TelemetryEvents')

        assert LogSink().emit(event) is True
        assert 'RestorePackageSourceSummary' in caplog.text
        assert '"NuGetOrg": "YesV3"' in caplog.text


class TestFileSink:
    """Tests for the JSON Lines file sink."""

    def test_get_sink_name(self, tmp_path):
        assert FileSink(file_path=str(tmp_path / 'events.jsonl')).get_sink_name() == 'file'

    def test_appends_events(self, event, tmp_path):
        path = tmp_path / 'out' / 'events.jsonl'
        sink = FileSink({'file_path': str(path)})

        assert sink.emit(event) is True
        assert sink.emit(event) is True

        lines = path.read_text(encoding='utf-8').splitlines()
        assert len(lines) == 2
        record = json.loads(lines[0])
        assert record['name'] == 'RestorePackageSourceSummary'
        assert record['properties']['NumHTTPv3Feeds'] == 1

    def test_unwritable_path(self, event, tmp_path):
        """Test that write failures are reported, not raised."""
        blocker = tmp_path / 'blocker'
        blocker.write_text('not a directory', encoding='utf-8')
        sink = FileSink(file_path=str(blocker / 'events.jsonl'))

        assert sink.emit(event) is False


class TestHTTPSink:
    """Tests for the HTTP sink."""

    SETTINGS = {'http': {'endpoint': 'https://collector.example.com/events', 'max_retries': 2, 'timeout': 5}}

    @pytest.fixture(autouse=True)
    def clean_environment(self, monkeypatch):
        monkeypatch.delenv('TELEMETRY_ENDPOINT', raising=False)
        monkeypatch.delenv('TELEMETRY_API_KEY', raising=False)

    def test_get_sink_name(self):
        assert HTTPSink(self.SETTINGS).get_sink_name() == 'http'

    @patch('sinks.http_sink.requests.post')
    def test_emit_success(self, mock_post, event):
        mock_response = Mock()
        mock_response.raise_for_status = Mock()
        mock_post.return_value = mock_response

        sink = HTTPSink(self.SETTINGS, api_key='secret')

        assert sink.emit(event) is True
        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == 'https://collector.example.com/events'
        assert kwargs['json'] == event.to_dict()
        assert kwargs['timeout'] == 5
        assert kwargs['headers']['Authorization'] == 'Bearer secret'

    @patch('sinks.http_sink.requests.post')
    def test_emit_retries_then_fails(self, mock_post, event):
        mock_post.side_effect = requests.exceptions.ConnectionError('collector down')

        sink = HTTPSink(self.SETTINGS)

        assert sink.emit(event) is False
        assert mock_post.call_count == 2

    @patch('sinks.http_sink.requests.post')
    def test_emit_http_error(self, mock_post, event):
        mock_response = Mock()
        mock_response.raise_for_status = Mock(side_effect=requests.exceptions.HTTPError('503'))
        mock_post.return_value = mock_response

        assert HTTPSink(self.SETTINGS).emit(event) is False

    @patch('sinks.http_sink.requests.post')
    def test_no_endpoint(self, mock_post, event):
        sink = HTTPSink({})

        assert sink.emit(event) is False
        mock_post.assert_not_called()

    def test_environment_endpoint(self, monkeypatch):
        monkeypatch.setenv('TELEMETRY_ENDPOINT', 'https://env.example.com/events')
        monkeypatch.setenv('TELEMETRY_API_KEY', 'from-env')

        sink = HTTPSink(self.SETTINGS)

        assert sink.endpoint == 'https://env.example.com/events'
        assert sink.api_key == 'from-env'

    def test_no_authorization_without_key(self):
        headers = HTTPSink(self.SETTINGS)._build_headers()
        assert 'Authorization' not in headers


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
