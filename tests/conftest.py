"""
Shared test fixtures and configuration.
"""

import io
import os
import textwrap
from pathlib import Path

import pytest

FIXED_SECRET = "3f2b8c4e-9a1d-4e6f-8b7a-2c5d9e0f1a3b"


@pytest.fixture
def fixed_secret() -> str:
    return FIXED_SECRET


@pytest.fixture
def answer():
    """Build a stdin stream that answers the project name prompt."""

    def _answer(text: str) -> io.StringIO:
        return io.StringIO(text + "\n")

    return _answer


@pytest.fixture
def valid_config_yaml(tmp_path: Path) -> Path:
    """Create a complete YAML node config in a temp directory."""
    content = textwrap.dedent("""\
        name: node-1
        port: 9000
        password: hunter2
        secret: admin-secret
        channel_prefix: relay
        node_ping_interval: 7
        insecure: false
        projects:
          - name: chat
            secret: chat-secret
            publish: true
            namespaces:
              - name: public
                anonymous: true
              - name: private
          - name: feeds
            secret: feeds-secret
    """)
    path = tmp_path / "config.yaml"
    path.write_text(content)
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep PUBNODE_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("PUBNODE_"):
            monkeypatch.delenv(key)
