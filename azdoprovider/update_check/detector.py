"""Secret change detection.

Decides, from a candidate secret and the memo stored on the previous pass,
whether the secret changed, and returns the memo to store going forward.
Nothing here persists state; the caller writes ``next_memo`` back.
"""

from __future__ import annotations

from dataclasses import dataclass

from azdoprovider.observability.logging import get_logger
from azdoprovider.update_check.hashing import BcryptHasher, Hasher, is_valid_memo

_logger = get_logger("update_check")


@dataclass(frozen=True)
class UpdateDecision:
    """Outcome of a single change-detection evaluation."""

    changed: bool
    next_memo: str


def is_blank(value: str) -> bool:
    """Return True for empty or whitespace-only strings."""
    return not value.strip()


def memo_matches_secret(secret: str, memo: str, hasher: Hasher) -> bool:
    if is_blank(memo):
        return False
    if not is_valid_memo(memo):
        _logger.debug("memo_unrecognized", prefix=memo[:4])
        return False
    return hasher.verify(memo, secret)


class SecretChangeDetector:
    """Pure decision logic over (candidate, stored memo) pairs.

    Args:
        hasher: Hashing primitive. Defaults to a minimum-cost BcryptHasher.
    """

    def __init__(self, hasher: Hasher | None = None) -> None:
        self._hasher: Hasher = hasher or BcryptHasher()

    @property
    def hasher(self) -> Hasher:
        return self._hasher

    def evaluate(self, candidate: str, stored_memo: str) -> UpdateDecision:
        """Decide whether *candidate* differs from the secret behind *stored_memo*.

        A blank candidate means "leave the existing secret alone" and is never a
        change. A candidate that verifies against the stored memo is unchanged.
        Anything else, including a memo that is garbage, yields a fresh memo.

        Raises:
            HashComputationError: if a new memo cannot be computed.
        """
        if is_blank(candidate):
            return UpdateDecision(changed=False, next_memo=stored_memo)

        if memo_matches_secret(candidate, stored_memo, self._hasher):
            return UpdateDecision(changed=False, next_memo=stored_memo)

        new_memo = self._hasher.generate(candidate)
        _logger.debug("secret_changed", had_memo=not is_blank(stored_memo))
        return UpdateDecision(changed=True, next_memo=new_memo)


def evaluate(candidate: str, stored_memo: str, hasher: Hasher | None = None) -> UpdateDecision:
    """Module-level shortcut for ``SecretChangeDetector(hasher).evaluate(...)``."""
    return SecretChangeDetector(hasher).evaluate(candidate, stored_memo)
