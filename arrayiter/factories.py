import typing
from collections.abc import Mapping
from .types import *

if typing.TYPE_CHECKING:
    from .collection import ArrayIteration

def from_iterable(data: Iterable[T]) -> 'ArrayIteration[T]':
    """wrap an iterable without copying it"""
    from .collection import ArrayIteration
    return ArrayIteration(data)

def from_array_like(data: Union[Mapping, Iterable[T]] = (), length: Optional[int] = None) -> 'ArrayIteration[T]':
    """
    build a writable array-like source. a mapping gives sparse positions
    ({0: 'a', 2: 'c'}), any other iterable gives dense ones. length defaults
    to one past the highest position and may be larger to leave trailing holes.
    """
    from .collection import ArrayIteration
    if isinstance(data, Mapping):
        positions = {int(k): v for k, v in data.items() if k != 'length'}
    else:
        positions = dict(enumerate(data))
    if length is None:
        length = max(positions) + 1 if positions else 0
    positions['length'] = length
    return ArrayIteration(positions)

def from_range(start: int, count: int) -> 'ArrayIteration[int]':
    """create adapter over a range"""
    from .collection import ArrayIteration
    return ArrayIteration(range(start, start + count))

def of(*items: T) -> 'ArrayIteration[T]':
    """writable array-like adapter holding the given items"""
    return from_array_like(items)

def empty() -> 'ArrayIteration[Any]':
    """create empty adapter"""
    from .collection import ArrayIteration
    return ArrayIteration(())

# --- aliases ---
array_iteration = from_iterable
A = from_iterable
