"""
value coercions shared by the adapter: number/length conversion, offset
clamping, equality and string rendering, plus callback preparation.
"""
from __future__ import annotations

import inspect
import locale
import math
import numbers
from functools import partial

import numpy as np

from .types import *
from .errors import InvalidCallback

MAX_SAFE_INTEGER = 2 ** 53 - 1
LOCALE_FRACTION_DIGITS = 3

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def to_number(value: Any) -> float:
    """loose numeric conversion: None and unparsable text become nan, blank text becomes 0"""
    if value is None: return math.nan
    if _is_boolean(value): return 1.0 if value else 0.0
    if isinstance(value, str):
        text = value.strip()
        if not text: return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return math.nan


def to_integer(value: Any) -> Union[int, float]:
    """truncate toward zero; nan becomes 0, infinities are kept"""
    if isinstance(value, numbers.Integral) and not _is_boolean(value):
        return int(value)
    number = to_number(value)
    if math.isnan(number): return 0
    if math.isinf(number): return number
    return int(number)


def to_length(value: Any) -> int:
    """integer length clamped to [0, MAX_SAFE_INTEGER]"""
    length = to_integer(value)
    if length <= 0:
        return 0
    return int(min(length, MAX_SAFE_INTEGER))


def relative_index(offset: Any, length: int) -> int:
    """resolve an offset against a known length, counting negatives from the end"""
    relative = to_integer(offset)
    if relative < 0:
        return int(max(length + relative, 0))
    return int(min(relative, length))


def _kind(value: Any) -> Any:
    if _is_boolean(value): return 'boolean'
    if isinstance(value, numbers.Number): return 'number'
    if isinstance(value, str): return 'string'
    return type(value)


def same_value_zero(x: Any, y: Any) -> bool:
    """
    equality where nan equals nan and +0 equals -0. values of different
    kinds (bool vs number vs str vs anything else) never match.
    """
    kind = _kind(x)
    if kind != _kind(y):
        return False
    if kind == 'number':
        if x != x and y != y:
            return True
        return bool(x == y)
    if x is y:
        return True
    result = x == y
    # elementwise comparisons (arrays, series, frames) only match by identity
    if not isinstance(result, (bool, np.bool_)):
        return False
    return bool(result)


def to_display_string(value: Any) -> str:
    """string form used by join; None renders empty"""
    if value is None:
        return ''
    return str(value)


def _format_locale_float(number: float) -> str:
    """fixed point with at most LOCALE_FRACTION_DIGITS decimals, grouped per LC_NUMERIC"""
    if math.isnan(number) or math.isinf(number):
        return str(number)
    text = locale.format_string(f'%.{LOCALE_FRACTION_DIGITS}f', number, grouping=True)
    point = locale.localeconv()['decimal_point']
    if point in text:
        text = text.rstrip('0').rstrip(point)
    return text


def to_locale_display_string(value: Any, locales: Any = None, options: Any = None) -> str:
    """locale-aware string form used by to_locale_string"""
    if value is None:
        return ''
    method = getattr(value, 'to_locale_string', None)
    if callable(method):
        return str(prepare_callback(method)(locales, options))
    if isinstance(value, numbers.Integral) and not _is_boolean(value):
        return locale.format_string('%d', int(value), grouping=True)
    if isinstance(value, numbers.Real) and not _is_boolean(value):
        return _format_locale_float(float(value))
    return to_display_string(value)


def _positional_capacity(target: Callable, minimum: int = 1) -> Optional[int]:
    """how many positional arguments the callable takes; None means unlimited"""
    if isinstance(target, type):
        # a class used as a callback converts its inputs: map(str), reduce(Pair)
        return minimum
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # builtins without introspection data (max, min, ...) get the minimum
        return minimum
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL:
            count += 1
    return count


def prepare_callback(callback: Any, context: Any = None, minimum: int = 1) -> Callable[..., Any]:
    """
    validate a callback once and return a caller that takes the full
    argument list. a non-None context is bound as the leading argument,
    and trailing arguments the callable does not accept are dropped, so
    `lambda x: ...` works where `(element, index, collection)` is offered.
    callables that cannot be inspected receive `minimum` arguments.
    """
    if not callable(callback):
        raise InvalidCallback(callback)
    target = callback if context is None else partial(callback, context)
    capacity = _positional_capacity(target, minimum)
    if capacity is None:
        return target
    return lambda *args: target(*args[:capacity])
