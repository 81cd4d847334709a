"""Diff suppression for secret fields.

The reconciliation framework asks, per field, whether an apparent change
needs a remote update. For secrets the configured value is compared against
the memo kept at ``<field>_hash`` in the resource state, never against a
stored plaintext.
"""

from __future__ import annotations

from azdoprovider.config import load_config
from azdoprovider.observability.logging import get_logger
from azdoprovider.tfsecrets.state import ResourceStateAccessor
from azdoprovider.update_check import BcryptHasher, Hasher, SecretChangeDetector

_logger = get_logger("tfsecrets")

MEMO_KEY_SUFFIX = "_hash"


def memo_key_for(field_key: str) -> str:
    """Return the state key holding the memo for *field_key*."""
    return field_key + MEMO_KEY_SUFFIX


class SecretDiffSuppressor:
    """Bridges SecretChangeDetector to the framework's per-field diff hook.

    Callers must guarantee at most one reconciliation pass per resource
    instance at a time. The suppressor reads then writes the memo without
    locking.

    Args:
        hasher: Hashing primitive handed to the detector.
    """

    def __init__(self, hasher: Hasher | None = None) -> None:
        self._detector = SecretChangeDetector(hasher)

    @property
    def detector(self) -> SecretChangeDetector:
        return self._detector

    def should_suppress_diff(
        self,
        field_key: str,
        candidate_value: str,
        state: ResourceStateAccessor,
    ) -> bool:
        """Return True when *candidate_value* is not a real change.

        The memo in *state* is refreshed whenever the detector returns a
        different one, whether or not the diff is suppressed.

        Raises:
            HashComputationError: propagated unchanged from the detector.
        """
        memo_key = memo_key_for(field_key)
        existing_memo = state.get(memo_key) or ""

        decision = self._detector.evaluate(candidate_value, existing_memo)

        if decision.next_memo != existing_memo:
            state.set(memo_key, decision.next_memo)
            _logger.debug("secret_memo_updated", field=field_key, memo_key=memo_key)

        return not decision.changed


_default_suppressor: SecretDiffSuppressor | None = None


def get_default_suppressor() -> SecretDiffSuppressor:
    """Return the process-wide suppressor, building one from AZDO_* configuration on first use."""
    global _default_suppressor
    if _default_suppressor is None:
        _default_suppressor = SecretDiffSuppressor(BcryptHasher(work_factor=load_config().memo.work_factor))
    return _default_suppressor


def set_default_suppressor(suppressor: SecretDiffSuppressor | None) -> None:
    """Install *suppressor* as the one used by diff_suppress_secret_changed.

    Passing None resets to lazy construction.
    """
    global _default_suppressor
    _default_suppressor = suppressor


def diff_suppress_secret_changed(
    key: str,
    old: str,
    new: str,
    state: ResourceStateAccessor,
) -> bool:
    """DiffSuppressFunc-shaped hook for protected schema fields.

    *old* is ignored: secrets are not kept in state, so the memo is the
    only record of the previous value.
    """
    return get_default_suppressor().should_suppress_diff(key, new, state)
