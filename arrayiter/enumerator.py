from __future__ import annotations
import typing
from .types import *
from .sources import IterableSource, ArrayLikeSource, Source

if typing.TYPE_CHECKING:
    from .collection import ArrayIteration


def iterate_source(source: Source) -> Iterator[Entry]:
    """
    the single traversal every operation is built on. indices are assigned here,
    densely from 0, whichever strategy produced the element.
    """
    if isinstance(source, IterableSource):
        # one cursor per traversal; positional access is never mixed in
        for index, item in enumerate(source.target):
            yield Entry(item, index, True)
    elif isinstance(source, ArrayLikeSource):
        for index in range(source.length()):
            present, value = source.lookup(index)
            yield Entry(value, index, present)


def iterate(collection: 'ArrayIteration[T]') -> Iterator[Entry]:
    """lazy (value, index, present) entries for an adapted collection"""
    return iterate_source(collection.source)
