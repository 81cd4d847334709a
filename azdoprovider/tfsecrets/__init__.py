"""Secret diff suppression glue between change detection and resource state.

Submodules:
    state     -- ResourceStateAccessor protocol and ResourceData.
    suppress  -- SecretDiffSuppressor and the framework hook function.
"""

from azdoprovider.tfsecrets.state import ResourceData, ResourceStateAccessor
from azdoprovider.tfsecrets.suppress import (
    MEMO_KEY_SUFFIX,
    SecretDiffSuppressor,
    diff_suppress_secret_changed,
    get_default_suppressor,
    memo_key_for,
    set_default_suppressor,
)

__all__ = [
    "MEMO_KEY_SUFFIX",
    "ResourceData",
    "ResourceStateAccessor",
    "SecretDiffSuppressor",
    "diff_suppress_secret_changed",
    "get_default_suppressor",
    "memo_key_for",
    "set_default_suppressor",
]
