"""convenient_operators — small functional helpers for configuring objects and handling optionals."""

__all__ = [
    "__version__",
    # Perform-after family
    "perform_after_reference",
    "perform_after_copy",
    "perform_after_reference_if_present",
    "perform_after_copy_if_present",
    # Optional helpers
    "negate_optional_bool",
    "select_if",
    "select_if_present",
    "select_if_condition_holds",
    "select_lazily",
    "compact",
    "assign_if_present",
    "set_attr_if_present",
    "set_item_if_present",
    # Copy configuration
    "CopyPolicy",
    "DEFAULT_POLICY",
    "SHALLOW_POLICY",
    "Draft",
    # Pipeline sugar
    "Step",
    "apply_reference",
    "apply_copy",
    # Errors
    "ConvenientOperatorsError",
    "CopyFailedError",
    "UnknownFieldError",
    "ReadOnlyFieldError",
    "NotARecordError",
]
__version__ = "1.0.2"

from convenient_operators.conditional import (  # noqa: E402
    assign_if_present,
    compact,
    negate_optional_bool,
    select_if,
    select_if_condition_holds,
    select_if_present,
    select_lazily,
    set_attr_if_present,
    set_item_if_present,
)
from convenient_operators.core import (  # noqa: E402
    DEFAULT_POLICY,
    SHALLOW_POLICY,
    CopyPolicy,
    Draft,
)
from convenient_operators.errors import (  # noqa: E402
    ConvenientOperatorsError,
    CopyFailedError,
    NotARecordError,
    ReadOnlyFieldError,
    UnknownFieldError,
)
from convenient_operators.perform import (  # noqa: E402
    perform_after_copy,
    perform_after_copy_if_present,
    perform_after_reference,
    perform_after_reference_if_present,
)
from convenient_operators.sugar import Step, apply_copy, apply_reference  # noqa: E402
