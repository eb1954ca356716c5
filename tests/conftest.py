from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from anypath import environ

if TYPE_CHECKING:
    from anypath.types import EnvLookup

# Deterministic stand-in for the process environment
FAKE_ENVIRONMENT: dict[str, str] = {
    "GLOBAL_VARIABLE": "/var/www/html",
    "HOME": "/home/admin",
    "SystemRoot": "C:\\Windows",
}


@pytest.fixture
def fake_env() -> dict[str, str]:
    """Fresh copy of the fake environment for tests that mutate it."""
    return dict(FAKE_ENVIRONMENT)


@pytest.fixture
def fake_lookup(fake_env: dict[str, str]) -> EnvLookup:
    """Environment lookup backed by ``fake_env`` instead of os.environ."""
    return environ.mapping_lookup(fake_env)
