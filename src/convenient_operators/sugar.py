"""``>>`` pipeline spelling of the perform-after family.

::

    label = Label() >> apply_reference(lambda l: setattr(l, "text", "Done"))
    copy = record >> apply_copy(lambda r: setattr(r, "text", "New"))
    maybe = badge >> apply_reference(configure_badge, if_present=True)

``obj >> step`` works through ``Step.__rrshift__``, so it only fires when
*obj*'s own ``__rshift__`` declines the operand.  Ints, strings, ``None``
and ordinary classes do; numpy arrays and other broadcasting types do not,
so call the step directly for those: ``apply_copy(fn)(array)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from convenient_operators.core.copy_policy import DEFAULT_POLICY, CopyPolicy
from convenient_operators.perform import (
    perform_after_copy,
    perform_after_copy_if_present,
    perform_after_reference,
    perform_after_reference_if_present,
)


@dataclass(frozen=True, slots=True)
class Step:
    """A configured perform-after call waiting for its object."""

    closure: Callable[[Any], Any]
    copy: bool = False
    if_present: bool = False
    policy: CopyPolicy = DEFAULT_POLICY

    def __call__(self, obj: Any) -> Any:
        if self.copy:
            if self.if_present:
                return perform_after_copy_if_present(obj, self.closure, policy=self.policy)
            return perform_after_copy(obj, self.closure, policy=self.policy)
        if self.if_present:
            return perform_after_reference_if_present(obj, self.closure)
        return perform_after_reference(obj, self.closure)

    def __rrshift__(self, obj: Any) -> Any:
        return self(obj)


def apply_reference(closure: Callable[[Any], Any], *, if_present: bool = False) -> Step:
    """Step for :func:`perform_after_reference` (or its ``_if_present`` variant)."""
    return Step(closure, copy=False, if_present=if_present)


def apply_copy(
    closure: Callable[[Any], Any],
    *,
    if_present: bool = False,
    policy: CopyPolicy = DEFAULT_POLICY,
) -> Step:
    """Step for :func:`perform_after_copy` (or its ``_if_present`` variant)."""
    return Step(closure, copy=True, if_present=if_present, policy=policy)
