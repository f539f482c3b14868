from __future__ import annotations

from .types import *
from .coercion import to_integer
from .errors import UnsupportedForSequenceSource
from .enumerator import iterate
from .sources import ArrayLikeSource, IterableSource, NoSource, Source, probe

# --- operation groups ---
from .extensions.core import _QueryOperations
from .extensions.search import _PositionalOperations
from .extensions.folding import _FoldOperations
from .extensions.strings import _StringOperations
from .extensions.mutation import _InPlaceOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

_UNSET = object()

# --- base adapter ---

class _BaseArrayIteration(Generic[T]):
    def __init__(self, source: Any = _UNSET):
        """wrap a source; it is probed once and never replaced"""
        self._source: Source = NoSource() if source is _UNSET else probe(source)

    @property
    def source(self) -> Source:
        return self._source

    @property
    def is_array_like(self) -> bool:
        return isinstance(self._source, ArrayLikeSource)

    @property
    def is_iterable(self) -> bool:
        return isinstance(self._source, IterableSource)

    @property
    def length(self) -> Optional[int]:
        """effective length, or None when the source cannot tell without being consumed"""
        return self._source.length()

    def _clamp_offset(self, offset: Any, operation: str) -> Union[int, float]:
        """non-negative offsets pass through; negative ones need a known length"""
        relative = to_integer(offset)
        if relative >= 0:
            return relative
        if not self.is_array_like:
            raise UnsupportedForSequenceSource(operation)
        return max(self._source.length() + relative, 0)

    def __iter__(self) -> Iterator[T]:
        return (value for value, _, present in iterate(self) if present)

    def __len__(self) -> int:
        length = self.length
        if length is None:
            raise TypeError(f"{type(self).__name__} over {type(self._source.target).__name__} has no known length")
        return length

    def __bool__(self) -> bool:
        # a view is always truthy; testing emptiness would consume one-shot sources
        return True

    def __contains__(self, item: Any) -> bool:
        return self.includes(item)

    def __getitem__(self, key: Union[int, slice]) -> Any:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("only contiguous slices are supported")
            return self.slice(0 if key.start is None else key.start, key.stop)
        return self.at(key)

    def __str__(self) -> str:
        return self.join()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

# --- main adapter class ---

class ArrayIteration(
    _BaseArrayIteration[T],
    _QueryOperations[T],
    _PositionalOperations[T],
    _FoldOperations[T],
    _StringOperations[T],
    _InPlaceOperations[T]
):
    """an ordered, indexable view over anything iterable or array-like."""
    def __init__(self, source: Any = _UNSET):
        super().__init__(source)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
