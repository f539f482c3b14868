from __future__ import annotations
import typing
from ..types import *
from ..coercion import prepare_callback
from ..enumerator import iterate

if typing.TYPE_CHECKING:
    from ..collection import ArrayIteration


class _QueryOperations(Generic[T]):
    def every(self: 'ArrayIteration[T]', predicate: Predicate, context: Any = None) -> bool:
        """true unless some present element fails the predicate"""
        call = prepare_callback(predicate, context)
        for value, index, present in iterate(self):
            if present and not call(value, index, self):
                return False
        return True

    def some(self: 'ArrayIteration[T]', predicate: Predicate, context: Any = None) -> bool:
        """true as soon as one present element passes the predicate"""
        call = prepare_callback(predicate, context)
        for value, index, present in iterate(self):
            if present and call(value, index, self):
                return True
        return False

    def filter(self: 'ArrayIteration[T]', predicate: Predicate, context: Any = None) -> List[T]:
        """present elements passing the predicate, in traversal order"""
        call = prepare_callback(predicate, context)
        return [value for value, index, present in iterate(self)
                if present and call(value, index, self)]

    def map(self: 'ArrayIteration[T]', selector: Selector, context: Any = None) -> List[U]:
        """project each present element to a new form"""
        call = prepare_callback(selector, context)
        return [call(value, index, self) for value, index, present in iterate(self) if present]

    def flat_map(self: 'ArrayIteration[T]', selector: Selector, context: Any = None) -> List[Any]:
        """project, then flatten list, tuple and adapter results by one level"""
        from ..collection import ArrayIteration
        call = prepare_callback(selector, context)
        result = []
        for value, index, present in iterate(self):
            if not present:
                continue
            projected = call(value, index, self)
            if isinstance(projected, ArrayIteration):
                result.extend(projected.values())
            elif isinstance(projected, (list, tuple)):
                result.extend(projected)
            else:
                result.append(projected)
        return result

    def find(self: 'ArrayIteration[T]', predicate: Predicate, context: Any = None) -> Union[T, Any]:
        """first present element passing the predicate, or NOT_FOUND"""
        call = prepare_callback(predicate, context)
        for value, index, present in iterate(self):
            if present and call(value, index, self):
                return value
        return NOT_FOUND

    def find_index(self: 'ArrayIteration[T]', predicate: Predicate, context: Any = None) -> int:
        """index of the first present element passing the predicate, or -1"""
        call = prepare_callback(predicate, context)
        for value, index, present in iterate(self):
            if present and call(value, index, self):
                return index
        return -1

    def find_last(self: 'ArrayIteration[T]', predicate: Predicate, context: Any = None) -> Union[T, Any]:
        """last present element passing the predicate, or NOT_FOUND"""
        call = prepare_callback(predicate, context)
        found = NOT_FOUND
        for value, index, present in iterate(self):
            if present and call(value, index, self):
                found = value
        return found

    def find_last_index(self: 'ArrayIteration[T]', predicate: Predicate, context: Any = None) -> int:
        call = prepare_callback(predicate, context)
        found = -1
        for value, index, present in iterate(self):
            if present and call(value, index, self):
                found = index
        return found

    def for_each(self: 'ArrayIteration[T]', action: Action, context: Any = None) -> None:
        """
        calls the action once per present element for its side effects.
        this is an EAGER operation and returns nothing.
        """
        call = prepare_callback(action, context)
        for value, index, present in iterate(self):
            if present:
                call(value, index, self)
