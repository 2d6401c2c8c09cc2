"""
Shared test fixtures for the npm launcher test suite.

Provides a stub HTTP session for the registry, canned response bodies,
and a settings TOML file written to disk (no mocking of the filesystem).
"""

import json
from unittest.mock import MagicMock

import pytest
import requests
import toml

from npm_launcher.utils.helpers import default_settings

STUB_ENDPOINT = "https://registry.test/v2/search"


def make_package(name, version, description="", npm_url=None):
    """One entry of the registry's "results" array."""
    package = {
        "name": name,
        "version": version,
        "links": {"npm": npm_url or f"https://www.npmjs.com/package/{name}"},
    }
    if description is not None:
        package["description"] = description
    return {"package": package, "score": {"final": 0.5}}


class StubSession:
    """Stands in for requests: records every get() and replays one response."""

    def __init__(self, status_code=200, body=None, exc=None):
        self.status_code = status_code
        self.body = body if body is not None else {"results": []}
        self.exc = exc
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        response = MagicMock()
        response.status_code = self.status_code
        if isinstance(self.body, (bytes, str)):
            response.content = self.body
        else:
            response.content = json.dumps(self.body).encode()
        return response


@pytest.fixture
def react_body():
    """Registry body with the single "react" hit."""
    return {
        "total": 1,
        "results": [
            make_package(
                "react",
                "18.0.0",
                "A JS library",
                "https://www.npmjs.com/package/react",
            )
        ],
    }


@pytest.fixture
def stub_session():
    """Factory for StubSession instances."""
    return StubSession


@pytest.fixture
def settings():
    """Default settings pointed at the stub endpoint."""
    data = default_settings()
    data["registry"]["endpoint"] = STUB_ENDPOINT
    return data


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "registry": {"endpoint": STUB_ENDPOINT, "timeout": 3, "encode_query": True},
        "results": {"icon_path": "Images/npm.png"},
        "logging": {"level": "debug"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("Name or service not known")
