"""Exception hierarchy for convenient_operators.

Absence of an optional operand is never an error: every operation turns it
into a no-op or propagates ``None``.  The exceptions below cover the ways
the copy family can fail on its own.  Exceptions raised inside caller
closures are not caught or wrapped.
"""

from __future__ import annotations


class ConvenientOperatorsError(Exception):
    """Base class for errors raised by this package."""


class CopyFailedError(ConvenientOperatorsError, TypeError):
    """Raised when a value cannot be copied for copy-and-transform."""

    def __init__(self, value_type: type, reason: str) -> None:
        self.value_type = value_type
        super().__init__(
            f"cannot copy {value_type.__qualname__} instance: {reason}"
        )


class UnknownFieldError(ConvenientOperatorsError, AttributeError):
    """Raised when a draft is asked to change something that is not a field."""

    def __init__(self, record_type: type, name: str) -> None:
        super().__init__(
            f"{record_type.__qualname__} has no field {name!r}"
        )
        # AttributeError.__init__ resets .name, so set it afterwards.
        self.record_type = record_type
        self.name = name


class ReadOnlyFieldError(ConvenientOperatorsError, AttributeError):
    """Raised when a draft is asked to change a field a copy cannot set.

    Dataclass fields declared with ``init=False`` are the only such fields.
    """

    def __init__(self, record_type: type, name: str) -> None:
        super().__init__(
            f"field {name!r} of {record_type.__qualname__} cannot be set on a copy"
        )
        self.record_type = record_type
        self.name = name


class NotARecordError(ConvenientOperatorsError, TypeError):
    """Raised when a value is not a record type a Draft can rebuild."""

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        super().__init__(f"{value_type.__qualname__} is not a supported record type")
