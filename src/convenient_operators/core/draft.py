"""Draft — a mutable stand-in for an immutable record.

Python has no in/out parameters, so a closure cannot rebind the record it is
handed.  For frozen records the copy family hands the closure a ``Draft``
instead: reads fall through to the record, writes are collected, and
:meth:`Draft.build` folds them into a new record once the closure returns.

Supported record kinds:

* frozen dataclasses      → ``dataclasses.replace``
* named tuples            → ``_replace``
* frozen pydantic models  → ``model_copy(update=...)``
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from convenient_operators.errors import (
    NotARecordError,
    ReadOnlyFieldError,
    UnknownFieldError,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _is_frozen_dataclass(value: Any) -> bool:
    return (
        dataclasses.is_dataclass(value)
        and not isinstance(value, type)
        and type(value).__dataclass_params__.frozen
    )


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _is_frozen_model(value: Any) -> bool:
    return isinstance(value, BaseModel) and bool(value.model_config.get("frozen"))


def is_record(value: Any) -> bool:
    """Return True if *value* is an immutable record a Draft can rebuild."""
    return (
        _is_frozen_dataclass(value)
        or _is_named_tuple(value)
        or _is_frozen_model(value)
    )


def record_fields(record: Any) -> tuple[str, ...]:
    """Names a Draft of *record* accepts for assignment.

    Dataclass fields declared with ``init=False`` are excluded because
    ``dataclasses.replace`` cannot set them.

    Raises
    ------
    NotARecordError
        If *record* is not one of the supported record kinds.
    """
    if _is_frozen_dataclass(record):
        return tuple(f.name for f in dataclasses.fields(record) if f.init)
    if _is_named_tuple(record):
        return tuple(type(record)._fields)
    if _is_frozen_model(record):
        return tuple(type(record).model_fields)
    raise NotARecordError(type(record))


def _is_read_only_field(record: Any, name: str) -> bool:
    return _is_frozen_dataclass(record) and any(
        f.name == name and not f.init for f in dataclasses.fields(record)
    )


def _rebuild(record: R, changes: dict[str, Any]) -> R:
    if _is_frozen_dataclass(record):
        return dataclasses.replace(record, **changes)
    if _is_named_tuple(record):
        return record._replace(**changes)  # type: ignore[attr-defined]
    return record.model_copy(update=changes)  # type: ignore[attr-defined]


def _slot(draft: Draft[Any], name: str) -> Any:
    return object.__getattribute__(draft, name)


class Draft(Generic[R]):
    """Collects field assignments destined for a copy of an immutable record.

    Example::

        draft = Draft(Label(text="Original"))
        draft.text = "New"
        Draft.build(draft)   # Label(text='New')

    Record field names shadow the Draft's own attributes, so a record with a
    ``build`` or ``changes`` field reads back its own value; reach the Draft
    API through the class (``Draft.build(draft)``) when that matters.
    """

    __slots__ = ("_record", "_fields", "_changes")

    def __init__(self, record: R) -> None:
        object.__setattr__(self, "_record", record)
        object.__setattr__(self, "_fields", frozenset(record_fields(record)))
        object.__setattr__(self, "_changes", {})

    def __getattribute__(self, name: str) -> Any:
        if name in _slot(self, "_fields"):
            changes = _slot(self, "_changes")
            if name in changes:
                return changes[name]
            return getattr(_slot(self, "_record"), name)
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        # Non-field attributes of the record (methods, properties).
        return getattr(_slot(self, "_record"), name)

    def __setattr__(self, name: str, value: Any) -> None:
        record = _slot(self, "_record")
        if name not in _slot(self, "_fields"):
            if _is_read_only_field(record, name):
                raise ReadOnlyFieldError(type(record), name)
            raise UnknownFieldError(type(record), name)
        _slot(self, "_changes")[name] = value

    def __delattr__(self, name: str) -> None:
        raise UnknownFieldError(type(_slot(self, "_record")), name)

    def __repr__(self) -> str:
        return f"Draft({_slot(self, '_record')!r}, changes={_slot(self, '_changes')!r})"

    @property
    def changes(self) -> dict[str, Any]:
        """Pending assignments (a copy)."""
        return dict(_slot(self, "_changes"))

    def build(self) -> R:
        """Return the record with all pending assignments applied."""
        record = _slot(self, "_record")
        changes = _slot(self, "_changes")
        if not changes:
            return record
        logger.debug(
            "rebuilding %s with fields %s",
            type(record).__qualname__,
            sorted(changes),
        )
        return _rebuild(record, dict(changes))
