"""Salted one-way hashing primitive for secret memos.

Hasher        -- Protocol the detector consumes (generate + verify pair).
BcryptHasher  -- bcrypt implementation with a configurable work factor.
is_valid_memo -- True when a memo carries a recognisable bcrypt prefix.
"""

from __future__ import annotations

from typing import Protocol

import bcrypt

from azdoprovider.errors import HashComputationError
from azdoprovider.models.config import MIN_WORK_FACTOR

# bcrypt ignores (or, in newer releases, rejects) input past this length.
MAX_SECRET_BYTES = 72

VALID_BCRYPT_HASH_PREFIXES = ("$2a$", "$2b$", "$2y$")


class Hasher(Protocol):
    """A salted one-way hash generator/verifier pair."""

    def generate(self, secret: str) -> str:
        """Return a new salted hash of *secret*.

        Raises:
            HashComputationError: if the primitive cannot produce a hash.
        """
        ...

    def verify(self, memo: str, candidate: str) -> bool:
        """Return True only if *candidate* is the preimage of *memo*.

        Must not raise for malformed memos.
        """
        ...


def is_valid_memo(memo: str) -> bool:
    """Return True when *memo* starts with a known bcrypt version prefix."""
    return memo.startswith(VALID_BCRYPT_HASH_PREFIXES)


class BcryptHasher:
    """bcrypt-backed Hasher.

    Args:
        work_factor: bcrypt cost (log2 rounds). Defaults to the minimum, 4;
                     memos detect change and are not password storage.
    """

    def __init__(self, work_factor: int = MIN_WORK_FACTOR) -> None:
        self._work_factor = work_factor

    @property
    def work_factor(self) -> int:
        return self._work_factor

    def generate(self, secret: str) -> str:
        try:
            encoded = secret.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise HashComputationError("secret is not valid UTF-8", cause=exc) from exc
        if len(encoded) > MAX_SECRET_BYTES:
            raise HashComputationError(
                f"secret is {len(encoded)} bytes, bcrypt accepts at most {MAX_SECRET_BYTES}"
            )
        try:
            salt = bcrypt.gensalt(rounds=self._work_factor)
            hashed = bcrypt.hashpw(encoded, salt)
        except (ValueError, OSError) as exc:
            raise HashComputationError(str(exc), cause=exc) from exc
        return hashed.decode("ascii")

    def verify(self, memo: str, candidate: str) -> bool:
        try:
            encoded = candidate.encode("utf-8")
        except UnicodeEncodeError:
            return False
        if len(encoded) > MAX_SECRET_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, memo.encode("utf-8"))
        except ValueError:
            # Invalid salt or hash shape: the memo is not ours.
            return False
