"""
Shared test fixtures for the Quicksearch test suite.

Provides a recording host (no subprocesses, no toolkit) and real
settings files written to a temporary directory.
"""

import pytest
import toml

from quicksearch.search import Cancellable, SearchProvider
from quicksearch.services.host import Host, Icon


class RecordingHost(Host):
    """Host that remembers opened URIs instead of launching anything."""

    def __init__(self, scale_factor=1):
        self.opened = []
        self.scale_factor = scale_factor

    def open_uri(self, uri):
        self.opened.append(uri)

    def create_cancel_token(self):
        return Cancellable()

    def create_icon(self, hint, size):
        scaled = size * self.scale_factor
        return Icon(icon_name=hint, width=scaled, height=scaled)


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def provider(host):
    return SearchProvider(host)


@pytest.fixture
def cancellable():
    return Cancellable()


@pytest.fixture
def cancelled():
    token = Cancellable()
    token.cancel()
    return token


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file overriding a few sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "provider": {"id": "test@quicksearch"},
        "search": {"max_results": 1},
        "icons": {"scale_factor": 2},
        "activation": {"opener": "true"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
