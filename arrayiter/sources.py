"""
source variants. a wrapped value is probed once, at construction, into one of
IterableSource (pull protocol), ArrayLikeSource (length plus integer positions)
or NoSource. everything downstream dispatches on the variant, never on the raw value.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from .types import *
from .coercion import to_length

logger = logging.getLogger(__name__)


def _has_length(target: Any) -> bool:
    return hasattr(target, 'length') or hasattr(type(target), '__len__')


def _raw_length(target: Any) -> Any:
    """the untreated length value: a 'length' key or attribute wins over __len__"""
    if isinstance(target, Mapping):
        return target.get('length')
    if hasattr(target, 'length'):
        return target.length
    if hasattr(type(target), '__len__'):
        return len(target)
    return None


class IterableSource(Generic[T]):
    """a source exposing __iter__; every traversal asks it for a fresh cursor"""
    is_array_like = False

    def __init__(self, target: Iterable[T]):
        self.target = target

    def length(self) -> Optional[int]:
        """known only when the iterable also reports a length"""
        if not _has_length(self.target):
            return None
        return to_length(_raw_length(self.target))

    def __repr__(self) -> str:
        return f"IterableSource({type(self.target).__name__})"


class ArrayLikeSource(Generic[T]):
    """
    a source with a length and integer positions but no pull protocol.
    mappings report presence by key, other objects by whether indexing raises LookupError.
    """
    is_array_like = True

    def __init__(self, target: Any):
        self.target = target
        self._is_mapping = isinstance(target, Mapping)

    def length(self) -> int:
        return to_length(_raw_length(self.target))

    def _key(self, index: int) -> Any:
        """the mapping key holding a position: the int itself, or its decimal text as in json objects"""
        if index in self.target:
            return index
        text = str(index)
        if text in self.target:
            return text
        return None

    def lookup(self, index: int) -> Tuple[bool, Optional[T]]:
        """(present, value) for one position; absent positions read as None"""
        if self._is_mapping:
            key = self._key(index)
            if key is None:
                return False, None
            return True, self.target[key]
        try:
            return True, self.target[index]
        except LookupError:
            return False, None

    @property
    def writable(self) -> bool:
        return hasattr(type(self.target), '__setitem__')

    def materialize(self) -> List[Any]:
        """copy every position into a concrete list, absent ones as HOLE"""
        buffer = []
        for index in range(self.length()):
            present, value = self.lookup(index)
            buffer.append(value if present else HOLE)
        return buffer

    def _discard(self, index: int) -> None:
        if self._is_mapping:
            key = self._key(index)
            if key is not None:
                del self.target[key]
            return
        present, _ = self.lookup(index)
        if present:
            del self.target[index]

    def _assign(self, index: int, value: Any) -> None:
        key = self._key(index) if self._is_mapping else None
        self.target[index if key is None else key] = value

    def store(self, buffer: List[Any]) -> None:
        """write a materialized buffer back, resizing the target to match"""
        previous = self.length()
        target = self.target
        logger.debug(f"writing {len(buffer)} positions back to {type(target).__name__} (was {previous})")

        if self._is_mapping or hasattr(target, 'length'):
            for index, value in enumerate(buffer):
                if value is HOLE:
                    self._discard(index)
                else:
                    self._assign(index, value)
            for index in range(len(buffer), previous):
                self._discard(index)
            if self._is_mapping:
                target['length'] = len(buffer)
            else:
                target.length = len(buffer)
            return

        # length comes from __len__, so resize through slice assignment
        target[:] = [None if value is HOLE else value for value in buffer]

    def __repr__(self) -> str:
        return f"ArrayLikeSource({type(self.target).__name__}, length={self.length()})"


class NoSource:
    """nothing recognizable was supplied: enumerates nothing, length unknown"""
    is_array_like = False

    def __init__(self, target: Any = None):
        self.target = target

    def length(self) -> None:
        return None

    def __repr__(self) -> str:
        return "NoSource()"


Source = Union[IterableSource, ArrayLikeSource, NoSource]


def probe(target: Any) -> Source:
    """classify a raw value, preferring the pull protocol over positional access"""
    if isinstance(target, (IterableSource, ArrayLikeSource, NoSource)):
        return target
    if not isinstance(target, Mapping) and hasattr(type(target), '__iter__'):
        source = IterableSource(target)
    elif isinstance(target, Mapping) or (hasattr(type(target), '__getitem__') and _has_length(target)):
        source = ArrayLikeSource(target)
    else:
        source = NoSource(target)
    logger.debug(f"probed {type(target).__name__} as {type(source).__name__}")
    return source
