"""Copy policy — how ``perform_after_copy`` detaches a value from its caller.

Every copy-and-transform call takes a ``policy=`` keyword; callers that do
not pass one get :data:`DEFAULT_POLICY` (deep copy, records edited through
a :class:`~convenient_operators.core.draft.Draft`).
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import TypeVar

from pydantic import BaseModel

from convenient_operators.errors import CopyFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CopyPolicy:
    """Immutable copy configuration."""

    deep: bool = True             # deepcopy | copy
    edit_records: bool = True     # frozen records are edited via a Draft


DEFAULT_POLICY = CopyPolicy()
SHALLOW_POLICY = CopyPolicy(deep=False)


def make_copy(value: T, policy: CopyPolicy = DEFAULT_POLICY) -> T:
    """Return an independent copy of *value* according to *policy*.

    Pydantic models are copied with ``model_copy`` so that private attributes
    and the fields-set bookkeeping survive; everything else goes through the
    :mod:`copy` protocol.

    Raises
    ------
    CopyFailedError
        If the value refuses to be copied (locks, generators, sockets, …).
    """
    if isinstance(value, BaseModel):
        strategy = f"model_copy(deep={policy.deep})"
    else:
        strategy = "deepcopy" if policy.deep else "copy"
    logger.debug("copying %s via %s", type(value).__qualname__, strategy)
    try:
        if isinstance(value, BaseModel):
            return value.model_copy(deep=policy.deep)
        if policy.deep:
            return copy.deepcopy(value)
        return copy.copy(value)
    except (TypeError, copy.Error) as exc:
        raise CopyFailedError(type(value), str(exc)) from exc
