"""Perform-after family — run a configuring closure, get the object back.

Two ownership disciplines, kept as two separate families:

* **reference** — the closure mutates the caller's object; the same object
  (``result is obj``) comes back and every alias sees the change.
* **copy** — the closure works on a private copy; the caller's object is
  never touched and the mutated copy comes back.

Typical use is configuring an object inside an expression::

    label = perform_after_reference(Label(), lambda l: setattr(l, "text", "Done"))
    updated = perform_after_copy(settings, lambda s: setattr(s, "name", "Garry"))

The ``*_if_present`` variants accept ``None`` and return ``None`` without
running the closure.  Exceptions raised by a closure propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from convenient_operators.core.copy_policy import DEFAULT_POLICY, CopyPolicy, make_copy
from convenient_operators.core.draft import Draft, is_record

logger = logging.getLogger(__name__)

T = TypeVar("T")


def perform_after_reference(obj: T, closure: Callable[[T], Any]) -> T:
    """Call ``closure(obj)`` and return *obj* itself."""
    closure(obj)
    return obj


def perform_after_copy(
    obj: T,
    closure: Callable[[T], Any],
    *,
    policy: CopyPolicy = DEFAULT_POLICY,
) -> T:
    """Call *closure* on a copy of *obj* and return the mutated copy.

    Frozen records (frozen dataclasses, named tuples, frozen pydantic models)
    cannot be mutated, so the closure receives a :class:`Draft` of the copy
    and field assignments on it produce the returned record.  Set
    ``policy.edit_records`` to False to hand the closure the raw copy.

    Raises
    ------
    CopyFailedError
        If *obj* cannot be copied.  The closure is not called.
    UnknownFieldError
        If the closure assigns a name that is not a field of the record.
    ReadOnlyFieldError
        If the closure assigns a dataclass field declared with ``init=False``.
    """
    copied = make_copy(obj, policy)
    if policy.edit_records and is_record(copied):
        draft = Draft(copied)
        closure(draft)  # type: ignore[arg-type]
        return Draft.build(draft)
    closure(copied)
    return copied


def perform_after_reference_if_present(
    obj: T | None,
    closure: Callable[[T], Any],
) -> T | None:
    """Like :func:`perform_after_reference`, but ``None`` skips the closure."""
    if obj is None:
        logger.debug("perform_after_reference_if_present: object absent, closure skipped")
        return None
    return perform_after_reference(obj, closure)


def perform_after_copy_if_present(
    obj: T | None,
    closure: Callable[[T], Any],
    *,
    policy: CopyPolicy = DEFAULT_POLICY,
) -> T | None:
    """Like :func:`perform_after_copy`, but ``None`` skips the closure."""
    if obj is None:
        logger.debug("perform_after_copy_if_present: object absent, closure skipped")
        return None
    return perform_after_copy(obj, closure, policy=policy)
