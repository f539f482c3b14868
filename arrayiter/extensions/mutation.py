from __future__ import annotations
import typing
from ..types import *
from ..coercion import relative_index, to_integer
from ..errors import InvalidCallback, ReadOnlySource, UnsupportedForSequenceSource
from ..sources import ArrayLikeSource

if typing.TYPE_CHECKING:
    from ..collection import ArrayIteration


def _unhole(value: Any) -> Any:
    return None if value is HOLE else value


class _InPlaceOperations(Generic[T]):
    """
    in-place operations, available only over array-like sources. each one copies the
    positions into a plain list, applies the list operation and writes the list back.
    every check happens before the source is touched.
    """

    def _writable_source(self: 'ArrayIteration[T]', operation: str) -> ArrayLikeSource:
        source = self.source
        if not isinstance(source, ArrayLikeSource):
            raise UnsupportedForSequenceSource(operation)
        if not source.writable:
            raise ReadOnlySource(operation)
        return source

    def copy_within(self: 'ArrayIteration[T]', target: Any, start: Any = 0, end: Any = None) -> 'ArrayIteration[T]':
        """copy positions [start, end) over the positions starting at target"""
        source = self._writable_source('copy_within')
        buffer = source.materialize()
        length = len(buffer)
        to = relative_index(target, length)
        begin = relative_index(start, length)
        finish = length if end is None else relative_index(end, length)
        count = min(finish - begin, length - to)
        if count > 0:
            buffer[to:to + count] = buffer[begin:begin + count]
        source.store(buffer)
        return self

    def fill(self: 'ArrayIteration[T]', value: Any, start: Any = 0, end: Any = None) -> 'ArrayIteration[T]':
        source = self._writable_source('fill')
        buffer = source.materialize()
        length = len(buffer)
        begin = relative_index(start, length)
        finish = length if end is None else relative_index(end, length)
        if finish > begin:
            buffer[begin:finish] = [value] * (finish - begin)
        source.store(buffer)
        return self

    def reverse(self: 'ArrayIteration[T]') -> 'ArrayIteration[T]':
        source = self._writable_source('reverse')
        buffer = source.materialize()
        buffer.reverse()
        source.store(buffer)
        return self

    def sort(self: 'ArrayIteration[T]', key: Optional[Callable[[T], Any]] = None,
             reverse: bool = False) -> 'ArrayIteration[T]':
        """stable sort of present elements; holes move to the end"""
        source = self._writable_source('sort')
        if key is not None and not callable(key):
            raise InvalidCallback(key)
        buffer = source.materialize()
        ordered = sorted((value for value in buffer if value is not HOLE), key=key, reverse=reverse)
        ordered.extend([HOLE] * (len(buffer) - len(ordered)))
        source.store(ordered)
        return self

    def push(self: 'ArrayIteration[T]', *items: T) -> int:
        """append items, returning the new length"""
        source = self._writable_source('push')
        buffer = source.materialize()
        buffer.extend(items)
        source.store(buffer)
        return len(buffer)

    def pop(self: 'ArrayIteration[T]') -> Optional[T]:
        """remove and return the last element, None when empty"""
        source = self._writable_source('pop')
        buffer = source.materialize()
        removed = buffer.pop() if buffer else None
        source.store(buffer)
        return _unhole(removed)

    def shift(self: 'ArrayIteration[T]') -> Optional[T]:
        """remove and return the first element, None when empty"""
        source = self._writable_source('shift')
        buffer = source.materialize()
        removed = buffer.pop(0) if buffer else None
        source.store(buffer)
        return _unhole(removed)

    def unshift(self: 'ArrayIteration[T]', *items: T) -> int:
        """insert items at the front, returning the new length"""
        source = self._writable_source('unshift')
        buffer = source.materialize()
        buffer[0:0] = items
        source.store(buffer)
        return len(buffer)

    def splice(self: 'ArrayIteration[T]', start: Any, delete_count: Any = None, *items: T) -> List[Optional[T]]:
        """
        remove delete_count elements from start (all of the rest when omitted),
        insert items in their place and return what was removed.
        """
        source = self._writable_source('splice')
        buffer = source.materialize()
        length = len(buffer)
        begin = relative_index(start, length)
        if delete_count is None:
            count = length - begin
        else:
            count = int(min(max(to_integer(delete_count), 0), length - begin))
        removed = buffer[begin:begin + count]
        buffer[begin:begin + count] = items
        source.store(buffer)
        return [_unhole(value) for value in removed]
