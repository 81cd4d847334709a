"""Azure DevOps infrastructure-as-code provider.

Subpackages:
    update_check  -- Secret change detection via salted one-way memos.
    tfsecrets     -- Diff-suppression hook and resource state accessor.
    schema        -- Field schemas, protected secret fields, plan computation.
    resources     -- Resource definitions (service endpoints).
"""

__version__ = "0.3.0"
