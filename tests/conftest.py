"""Pytest configuration and fixtures.

Provides environment isolation so a developer's shell or ``.env`` file
cannot change logging behavior under test. All fixtures here are autouse
unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_failbridge_env(request, monkeypatch):
    """Clear FAILBRIDGE_* env vars to prevent test pollution.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FAILBRIDGE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def recorder():
    """Return a fresh failure-recording handler."""
    from tests.helpers import Recorder

    return Recorder()
