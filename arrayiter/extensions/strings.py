from __future__ import annotations
import typing
from ..types import *
from ..coercion import to_display_string, to_locale_display_string
from ..enumerator import iterate

if typing.TYPE_CHECKING:
    from ..collection import ArrayIteration

DEFAULT_SEPARATOR = ','
LOCALE_SEPARATOR = ','


class _StringOperations(Generic[T]):
    def join(self: 'ArrayIteration[T]', separator: Optional[str] = None) -> str:
        """string form of every position joined by separator; None and holes render empty"""
        separator = DEFAULT_SEPARATOR if separator is None else str(separator)
        return separator.join(to_display_string(value) if present else ''
                              for value, _, present in iterate(self))

    def to_locale_string(self: 'ArrayIteration[T]', locales: Any = None, options: Any = None) -> str:
        """like join, but each element renders its locale-aware form"""
        return LOCALE_SEPARATOR.join(to_locale_display_string(value, locales, options) if present else ''
                                     for value, _, present in iterate(self))
