"""Secret change detection for sensitive resource fields.

Submodules:
    hashing   -- Hasher protocol and the bcrypt implementation.
    detector  -- SecretChangeDetector and the evaluate() shortcut.
"""

from azdoprovider.update_check.detector import (
    SecretChangeDetector,
    UpdateDecision,
    evaluate,
    is_blank,
)
from azdoprovider.update_check.hashing import BcryptHasher, Hasher, is_valid_memo

__all__ = [
    "BcryptHasher",
    "Hasher",
    "SecretChangeDetector",
    "UpdateDecision",
    "evaluate",
    "is_blank",
    "is_valid_memo",
]
