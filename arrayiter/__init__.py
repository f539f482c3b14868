"""
     _   ___ ___    ___   __  __ ___ _____ ___ ___
    /_\ | _ \ _ \  /_\ \ / / |_ _|_   _| __| _ \
   / _ \|   /   / / _ \ V /   | |  | | | _||   /
  /_/ \_\_|_\_|_\/_/ \_\_|   |___| |_| |___|_|_\
"""

# expose the main class
from .collection import ArrayIteration

# expose the traversal
from .enumerator import iterate, iterate_source
from .sources import ArrayLikeSource, IterableSource, NoSource, probe

# expose the factory functions
from .factories import (
    from_iterable,
    from_array_like,
    from_range,
    of,
    empty,
    array_iteration,
    A
)

# expose supporting types and helpers
from .types import Entry, NOT_FOUND
from .coercion import MAX_SAFE_INTEGER, same_value_zero, to_integer, to_length
from .errors import (
    ArrayIterationError,
    EmptySequenceNoSeed,
    InvalidCallback,
    ReadOnlySource,
    UnsupportedForSequenceSource
)

# define what `import *` does
__all__ = [
    "ArrayIteration",
    "iterate",
    "iterate_source",
    "ArrayLikeSource",
    "IterableSource",
    "NoSource",
    "probe",
    "from_iterable",
    "from_array_like",
    "from_range",
    "of",
    "empty",
    "array_iteration",
    "A",
    "Entry",
    "NOT_FOUND",
    "MAX_SAFE_INTEGER",
    "same_value_zero",
    "to_integer",
    "to_length",
    "ArrayIterationError",
    "EmptySequenceNoSeed",
    "InvalidCallback",
    "ReadOnlySource",
    "UnsupportedForSequenceSource"
]
