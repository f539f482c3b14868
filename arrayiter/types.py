from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks receive (element, index, collection); shorter signatures are fine
Predicate = Callable[..., Any]
Selector = Callable[..., U]
Action = Callable[..., Any]
Reducer = Callable[..., U]


class Entry(NamedTuple):
    """one step of a traversal: the element, its dense index and whether the position exists"""
    value: Any
    index: int
    present: bool


class _NotFound:
    """sentinel returned by find-style operations when nothing matched"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "NOT_FOUND"

    def __reduce__(self):
        return (_NotFound, ())


NOT_FOUND = _NotFound()


class _Hole:
    """marks an absent position inside a materialized buffer"""

    def __repr__(self) -> str: return "<hole>"


HOLE = _Hole()


class _Missing:
    """marks an omitted optional argument where None is a legal value"""

    def __repr__(self) -> str: return "<missing>"


MISSING = _Missing()
