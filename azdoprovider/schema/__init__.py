"""Resource schemas and plan computation.

Submodules:
    fields  -- FieldSchema, ResourceSchema and protected secret field helpers.
    plan    -- plan_resource(), the consumer of diff-suppression hooks.
"""

from azdoprovider.schema.fields import (
    FieldSchema,
    FieldType,
    ResourceSchema,
    generate_secret_memo_schema,
    make_protected_schema,
    make_unprotected_schema,
)
from azdoprovider.schema.plan import AttributeDiff, ResourcePlan, plan_resource

__all__ = [
    "AttributeDiff",
    "FieldSchema",
    "FieldType",
    "ResourcePlan",
    "ResourceSchema",
    "generate_secret_memo_schema",
    "make_protected_schema",
    "make_unprotected_schema",
    "plan_resource",
]
