from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..coercion import prepare_callback
from ..enumerator import iterate

if typing.TYPE_CHECKING:
    from ..collection import ArrayIteration


class TerminalAccessor(Generic[T]):
    """materializing conversions; each one runs a single traversal"""

    def __init__(self, collection_instance: 'ArrayIteration[T]'):
        self._collection = collection_instance

    def list(self) -> List[T]:
        """convert present elements to list"""
        return list(self._collection.values())

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._collection.values())

    def set(self) -> Set[T]:
        return set(self._collection.values())

    def dict(self, key_selector: Callable[[T], K],
             value_selector: Optional[Callable[[T], V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._collection.values()}

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert present elements to a numpy array"""
        return np.array(self.list(), dtype=dtype)

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """convert to a pandas series indexed by traversal index, so holes show as gaps"""
        indices, values = [], []
        for value, index, present in iterate(self._collection):
            if present:
                indices.append(index)
                values.append(value)
        return pd.Series(values, index=pd.Index(indices, dtype='int64'), name=name)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate] = None, context: Any = None) -> int:
        """count present elements, optionally only those passing the predicate"""
        if predicate is None:
            return sum(1 for _ in self._collection.values())
        call = prepare_callback(predicate, context)
        return sum(1 for value, index, present in iterate(self._collection)
                   if present and call(value, index, self._collection))
