"""Shared fixtures for integration tests.

Wires a configured Provider with a real minimum-cost bcrypt hasher so tests
exercise full plan passes without a live Azure DevOps organisation.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from azdoprovider.models.config import LogConfig, MemoConfig, ProviderConfig
from azdoprovider.provider import Provider
from azdoprovider.tfsecrets import ResourceData, set_default_suppressor
from azdoprovider.update_check import BcryptHasher

TEST_PROJECT_ID = "7e5c9f0a-3b1d-4c2e-8a6f-1d2b3c4d5e6f"


def make_github_config(token: str, name: str = "gh-conn", project_id: str = TEST_PROJECT_ID) -> dict[str, str]:
    """Configured attributes for a GitHub service endpoint."""
    return {
        "project_id": project_id,
        "service_endpoint_name": name,
        "personal_access_token": token,
    }


@pytest.fixture
def provider(monkeypatch: pytest.MonkeyPatch) -> Iterator[Provider]:
    monkeypatch.delenv("AZDO_GITHUB_SERVICE_CONNECTION_PAT", raising=False)
    p = Provider(
        config=ProviderConfig(
            org_service_url="https://dev.azure.com/test-org",
            memo=MemoConfig(work_factor=4),
            log=LogConfig(level="warning"),
        ),
    )
    p.configure()
    yield p
    set_default_suppressor(None)


@pytest.fixture
def hasher() -> BcryptHasher:
    return BcryptHasher()


@pytest.fixture
def state() -> ResourceData:
    return ResourceData()
