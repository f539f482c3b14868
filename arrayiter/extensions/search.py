from __future__ import annotations
import math
import typing
from ..types import *
from ..coercion import same_value_zero, to_integer
from ..enumerator import iterate
from ..errors import UnsupportedForSequenceSource

if typing.TYPE_CHECKING:
    from ..collection import ArrayIteration


class _PositionalOperations(Generic[T]):
    def includes(self: 'ArrayIteration[T]', target: Any, from_index: Any = 0) -> bool:
        """membership by same-value-zero, starting at from_index"""
        begin = self._clamp_offset(from_index, 'includes')
        for value, index, present in iterate(self):
            if index >= begin and present and same_value_zero(target, value):
                return True
        return False

    def index_of(self: 'ArrayIteration[T]', target: Any, from_index: Any = 0) -> int:
        """index of the first present element equal to target at or after from_index, or -1"""
        begin = self._clamp_offset(from_index, 'index_of')
        for value, index, present in iterate(self):
            if index >= begin and present and same_value_zero(target, value):
                return index
        return -1

    def last_index_of(self: 'ArrayIteration[T]', target: Any) -> int:
        found = -1
        for value, index, present in iterate(self):
            if present and same_value_zero(target, value):
                found = index
        return found

    def slice(self: 'ArrayIteration[T]', start: Any = 0, end: Any = None) -> List[T]:
        """
        present elements whose index falls in [start, end). end defaults to
        unbounded; pulling stops at end, so infinite iterables are safe to slice.
        """
        begin = self._clamp_offset(start, 'slice')
        finish = math.inf if end is None else self._clamp_offset(end, 'slice')
        result = []
        if begin >= finish:
            return result
        for value, index, present in iterate(self):
            if present and index >= begin:
                result.append(value)
            if index + 1 >= finish:
                break
        return result

    def at(self: 'ArrayIteration[T]', position: Any) -> Optional[T]:
        """element at a traversal index; negative indexes count from the end of array-likes"""
        position = to_integer(position)
        if position < 0:
            if not self.is_array_like:
                raise UnsupportedForSequenceSource('at')
            position = self.source.length() + position
            if position < 0:
                return None
        if self.is_array_like:
            if position >= self.source.length():
                return None
            present, value = self.source.lookup(position)
            return value if present else None
        for value, index, present in iterate(self):
            if index == position:
                return value if present else None
        return None

    def values(self: 'ArrayIteration[T]') -> Iterator[T]:
        """lazy iterator over present elements"""
        return (value for value, _, present in iterate(self) if present)

    def keys(self: 'ArrayIteration[T]') -> Iterator[int]:
        """every position of an array-like source, holes included"""
        if not self.is_array_like:
            raise UnsupportedForSequenceSource('keys')
        return iter(range(self.source.length()))

    def entries(self: 'ArrayIteration[T]') -> Iterator[Tuple[int, Optional[T]]]:
        """(index, value) for every position of an array-like source; holes read as None"""
        if not self.is_array_like:
            raise UnsupportedForSequenceSource('entries')
        return ((index, value) for value, index, _ in iterate(self))

    def concat(self: 'ArrayIteration[T]', *others: Any) -> List[Any]:
        """
        materializes the present elements followed by each argument. lists, tuples
        and adapters are spread, anything else is appended as a single element.
        """
        from ..collection import ArrayIteration
        result = list(self.values())
        for other in others:
            if isinstance(other, ArrayIteration):
                result.extend(other.values())
            elif isinstance(other, (list, tuple)):
                result.extend(other)
            else:
                result.append(other)
        return result
