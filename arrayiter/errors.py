from __future__ import annotations


class ArrayIterationError(Exception):
    """Base class for everything the adapter raises on its own."""


class InvalidCallback(ArrayIterationError, TypeError):
    """A callback argument is not callable."""

    def __init__(self, callback: object) -> None:
        self.callback = callback
        super().__init__(f"the callback argument is not callable: {callback!r}")


class UnsupportedForSequenceSource(ArrayIterationError, TypeError):
    """Positional semantics were requested from a source that only iterates."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() is not supported for iterable sources")


class ReadOnlySource(ArrayIterationError, TypeError):
    """An in-place operation hit an array-like source that cannot be written."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() needs an array-like source that supports item assignment")


class EmptySequenceNoSeed(ArrayIterationError, ValueError):
    """A fold ran over zero present elements without a seed."""

    def __init__(self, operation: str = "reduce") -> None:
        self.operation = operation
        super().__init__(f"cannot {operation} empty sequence without seed")


__all__ = (
    "ArrayIterationError",
    "EmptySequenceNoSeed",
    "InvalidCallback",
    "ReadOnlySource",
    "UnsupportedForSequenceSource",
)
