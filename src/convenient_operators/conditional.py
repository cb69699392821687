"""Optional-aware helpers: negation, conditional select, conditional assign.

``None`` is absence throughout.  None of these functions treat absence as an
error; it either propagates as ``None`` or turns the call into a no-op.

Conditional select exists to build sparse collections::

    subviews = compact([
        name_label,                              # always present
        select_if(props.show_badge, badge_view), # only when show_badge is True
        select_if_present(badge_name, badge),    # only when badge_name is set
    ])

The eager ``select_*`` functions receive ``right`` already evaluated, so any
side effect of building it happens even when the result is ``None``.  Use
:func:`select_lazily` when building ``right`` is expensive or has effects.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, MutableMapping, MutableSequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ── negation ──────────────────────────────────────────────────────────


def negate_optional_bool(value: bool | None) -> bool | None:
    """Three-valued NOT: True → False, False → True, None → None."""
    if value is None:
        return None
    return not value


# ── conditional select ────────────────────────────────────────────────


def select_if(condition: bool | None, right: T | None) -> T | None:
    """Boolean gate: *right* when *condition* is True, otherwise ``None``."""
    if condition is None or not condition:
        return None
    return right


def select_if_present(gate: object | None, right: T | None) -> T | None:
    """Presence gate: *right* when *gate* is not ``None``, whatever its value.

    A present ``False`` opens the gate.  Use :func:`select_if` to test a
    boolean's value instead.
    """
    if gate is None:
        return None
    return right


def _condition_holds(left: Any) -> bool:
    # A present bool is a boolean gate, never a presence gate.
    if left is None:
        return False
    if isinstance(left, bool):
        return left
    return True


def select_if_condition_holds(left: Any, right: T | None) -> T | None:
    """Select *right* under a condition that may be a bool or any optional.

    * ``left is None``            → ``None``
    * ``left`` is a ``bool``      → *right* if ``left`` else ``None``
    * any other present ``left``  → *right*

    *right* is returned as given, so its own ``None`` passes through.
    Prefer :func:`select_if` / :func:`select_if_present` when the kind of
    condition is known.
    """
    if not _condition_holds(left):
        return None
    return right


def select_lazily(left: Any, factory: Callable[[], T | None]) -> T | None:
    """Same dispatch as :func:`select_if_condition_holds`, evaluated lazily.

    *factory* is called (once) only when the condition holds.
    """
    if not _condition_holds(left):
        logger.debug("select_lazily: condition %r does not hold, factory skipped", left)
        return None
    return factory()


def compact(items: Iterable[T | None]) -> list[T]:
    """Drop the ``None`` entries of *items*, keeping order."""
    return [item for item in items if item is not None]


# ── conditional assign ────────────────────────────────────────────────


def assign_if_present(left: T, right: T | None) -> T:
    """Return *right* when present, else *left* unchanged.

    The rebinding form for plain variables::

        text = assign_if_present(text, maybe_text)
    """
    if right is None:
        return left
    return right


def set_attr_if_present(target: object, name: str, right: Any | None) -> None:
    """``setattr(target, name, right)`` only when *right* is not ``None``."""
    if right is None:
        return
    setattr(target, name, right)


def set_item_if_present(
    target: MutableMapping[Any, Any] | MutableSequence[Any],
    key: Any,
    right: Any | None,
) -> None:
    """``target[key] = right`` only when *right* is not ``None``."""
    if right is None:
        return
    target[key] = right
