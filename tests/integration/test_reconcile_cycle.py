"""End-to-end secret change detection across reconciliation passes.

Runs the documented four-step scenario on a bare ``token`` field through the
suppressor, then the same lifecycle through the provider's plan for a GitHub
service endpoint, including the create/flatten step in between.
"""

from __future__ import annotations

from uuid import UUID

import pytest

from azdoprovider.models.service_endpoint import ServiceEndpoint
from azdoprovider.provider import Provider
from azdoprovider.resources import (
    GITHUB_RESOURCE_TYPE,
    expand_github_service_endpoint,
    flatten_service_endpoint,
)
from azdoprovider.tfsecrets import ResourceData, SecretDiffSuppressor
from azdoprovider.update_check import BcryptHasher, is_valid_memo

from .conftest import TEST_PROJECT_ID, make_github_config

pytestmark = pytest.mark.integration


class TestTokenScenario:
    def test_four_passes(self, hasher: BcryptHasher, state: ResourceData) -> None:
        suppressor = SecretDiffSuppressor(hasher)

        # 1. first value: real change, memo created
        assert suppressor.should_suppress_diff("token", "abc123", state) is False
        memo1 = state.get("token_hash")
        assert is_valid_memo(memo1)
        assert hasher.verify(memo1, "abc123")

        # 2. same value again: suppressed, memo untouched
        assert suppressor.should_suppress_diff("token", "abc123", state) is True
        assert state.get("token_hash") == memo1

        # 3. cleared: suppressed, memo untouched
        assert suppressor.should_suppress_diff("token", "", state) is True
        assert state.get("token_hash") == memo1

        # 4. rotated: real change, memo replaced
        assert suppressor.should_suppress_diff("token", "xyz789", state) is False
        memo4 = state.get("token_hash")
        assert memo4 != memo1
        assert hasher.verify(memo4, "xyz789")
        assert not hasher.verify(memo4, "abc123")

    def test_garbage_memo_self_heals(self, hasher: BcryptHasher) -> None:
        state = ResourceData(attributes={"token_hash": "legacy-value"})
        suppressor = SecretDiffSuppressor(hasher)

        assert suppressor.should_suppress_diff("token", "abc123", state) is False
        assert hasher.verify(state.get("token_hash"), "abc123")
        assert suppressor.should_suppress_diff("token", "abc123", state) is True


class TestGithubEndpointLifecycle:
    def _create(self, provider: Provider, state: ResourceData, token: str) -> None:
        """Simulate the create call: expand, pretend the API answered, flatten."""
        plan = provider.plan(GITHUB_RESOURCE_TYPE, make_github_config(token), state)
        assert plan.requires_update is True
        for diff in plan.diffs:
            if not diff.sensitive:
                state.set(diff.key, diff.new)

        endpoint, project_id = expand_github_service_endpoint(state, token)
        assert endpoint.authorization is not None
        assert endpoint.authorization.parameters["accessToken"] == token

        created = ServiceEndpoint(id=UUID("0b7c2f55-52a8-4a44-9c8e-5e2d1f3a4b6c"), name=endpoint.name)
        flatten_service_endpoint(state, created, project_id)

    def test_plan_lifecycle(self, provider: Provider, state: ResourceData, hasher: BcryptHasher) -> None:
        self._create(provider, state, "ghp_first")
        assert state.id == "0b7c2f55-52a8-4a44-9c8e-5e2d1f3a4b6c"
        assert "ghp_first" not in state.attributes.values()
        memo = state.get("personal_access_token_hash")
        assert hasher.verify(memo, "ghp_first")

        # Same token re-supplied: nothing to do.
        plan = provider.plan(GITHUB_RESOURCE_TYPE, make_github_config("ghp_first"), state)
        assert plan.requires_update is False
        assert state.get("personal_access_token_hash") == memo

        # Token rotated: only the secret changes, and it is masked.
        plan = provider.plan(GITHUB_RESOURCE_TYPE, make_github_config("ghp_second"), state)
        assert plan.changed_keys() == ["personal_access_token"]
        assert plan.force_new is False
        assert "ghp_second" not in plan.diffs[0].render()
        assert hasher.verify(state.get("personal_access_token_hash"), "ghp_second")

    def test_token_from_environment(
        self,
        provider: Provider,
        state: ResourceData,
        hasher: BcryptHasher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("AZDO_GITHUB_SERVICE_CONNECTION_PAT", "ghp_env")
        config = {"project_id": TEST_PROJECT_ID, "service_endpoint_name": "gh-conn"}

        provider.plan(GITHUB_RESOURCE_TYPE, config, state)

        assert hasher.verify(state.get("personal_access_token_hash"), "ghp_env")

    def test_project_change_forces_replacement(self, provider: Provider, state: ResourceData) -> None:
        self._create(provider, state, "ghp_first")

        plan = provider.plan(
            GITHUB_RESOURCE_TYPE,
            make_github_config("ghp_first", project_id="another-project"),
            state,
        )

        assert plan.changed_keys() == ["project_id"]
        assert plan.force_new is True
