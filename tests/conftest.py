"""Shared test fixtures for acme-linode."""

import pytest

_SOLVER_ENV = ("POD_NAMESPACE", "LINODE_TOKEN_SECRET_NAME", "LINODE_TOKEN_SECRET_KEY")


@pytest.fixture(autouse=True)
def _clean_solver_env(monkeypatch):
    """Keep the host environment from leaking into namespace and secret defaults."""
    for name in _SOLVER_ENV:
        monkeypatch.delenv(name, raising=False)
