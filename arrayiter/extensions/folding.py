from __future__ import annotations
import typing
from ..types import *
from ..coercion import prepare_callback
from ..enumerator import iterate
from ..errors import EmptySequenceNoSeed

if typing.TYPE_CHECKING:
    from ..collection import ArrayIteration


class _FoldOperations(Generic[T]):
    def reduce(self: 'ArrayIteration[T]', reducer: Reducer, seed: Any = MISSING) -> Any:
        """
        left fold over present elements; the reducer sees
        (accumulator, element, index, collection). without a seed the first
        present element starts the fold and the reducer is not called for it.
        """
        call = prepare_callback(reducer, minimum=2)
        accumulator = seed
        for value, index, present in iterate(self):
            if not present:
                continue
            if accumulator is MISSING:
                accumulator = value
                continue
            accumulator = call(accumulator, value, index, self)
        if accumulator is MISSING:
            raise EmptySequenceNoSeed('reduce')
        return accumulator

    def reduce_right(self: 'ArrayIteration[T]', reducer: Reducer, seed: Any = MISSING) -> Any:
        """right fold; needs the whole traversal up front, so present entries are materialized"""
        call = prepare_callback(reducer, minimum=2)
        entries = [entry for entry in iterate(self) if entry.present]
        accumulator = seed
        for value, index, _ in reversed(entries):
            if accumulator is MISSING:
                accumulator = value
                continue
            accumulator = call(accumulator, value, index, self)
        if accumulator is MISSING:
            raise EmptySequenceNoSeed('reduce_right')
        return accumulator
