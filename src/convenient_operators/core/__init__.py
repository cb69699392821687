"""Copy machinery behind the copy-and-transform family."""

from convenient_operators.core.copy_policy import (
    DEFAULT_POLICY,
    SHALLOW_POLICY,
    CopyPolicy,
    make_copy,
)
from convenient_operators.core.draft import (
    Draft,
    is_record,
    record_fields,
)

__all__ = [
    "CopyPolicy",
    "DEFAULT_POLICY",
    "SHALLOW_POLICY",
    "make_copy",
    "Draft",
    "is_record",
    "record_fields",
]
