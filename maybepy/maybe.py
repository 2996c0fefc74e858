from __future__ import annotations
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, Type, TypeVar, Union

from .errors import IllegalPresentValue
from .functions import (
    AsyncSupplier,
    FallibleSupplier,
    Supplier,
    constant,
    constant_mapper,
    empty_iterator,
    identity,
    raising,
    single_element_iterator,
)

A = TypeVar("A")
B = TypeVar("B")

# set once both variants exist; no further subclasses after that
_sealed = False


class Maybe(Generic[A]):
    """A value that is either empty or present with exactly one non-None payload.

    There is deliberately no accessor for the payload. Everything goes through
    :meth:`fold`, so every caller has to say what happens when the value is
    missing. Build instances with :func:`empty`, :func:`present` or
    :func:`from_nullable`.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Maybe[A]":
        if cls is Maybe:
            raise TypeError("Maybe cannot be instantiated directly; use empty(), present() or from_nullable()")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if _sealed or cls.__module__ != __name__:
            raise TypeError("Subclassing not allowed")

    def fold(self, if_present: Callable[[A], B], if_empty: Callable[[], B]) -> B:
        """Call ``if_present(value)`` or ``if_empty()``, exactly once, and return its result."""
        raise NotImplementedError

    def is_present(self) -> bool: return self.fold(constant_mapper(True), constant(False))
    def is_empty(self) -> bool: return not self.is_present()

    def or_else(self, default: A) -> A:
        # default is already evaluated; callables are returned, not called
        return self.or_else_get(constant(default))

    def or_else_get(self, supplier: Supplier[A]) -> A:
        return self.fold(identity, supplier)

    def or_else_try(self, supplier: FallibleSupplier[A]) -> A:
        """Like :meth:`or_else_get`; whatever ``supplier`` raises reaches the caller untouched."""
        return self.or_else_get(supplier)

    def or_else_none(self) -> Optional[A]:
        return self.fold(identity, constant(None))

    def or_else_raise(self, error: Union[BaseException, Type[BaseException]]) -> A:
        return self.fold(identity, raising(error))

    def or_else_raise_with(self, error_supplier: Callable[[], BaseException]) -> A:
        """Raise the exception built by ``error_supplier`` when empty.

        The supplier only runs on the empty path, so exceptions that are costly
        to build are never built for present values.
        """
        def fail() -> A:
            raise error_supplier()
        return self.fold(identity, fail)

    async def or_else_await(self, supplier: AsyncSupplier[A]) -> A:
        return await self.fold(_ready, supplier)

    def to_iterator(self) -> Iterator[A]:
        return self.fold(single_element_iterator, empty_iterator)

    def __iter__(self) -> Iterator[A]:
        return self.to_iterator()


async def _ready(value: A) -> A:
    return value


class _Empty(Maybe[Any]):
    __slots__ = ()

    def fold(self, if_present: Callable[[Any], B], if_empty: Callable[[], B]) -> B:
        return if_empty()

    def __repr__(self) -> str: return "empty()"

    # copies and unpickled values resolve to the shared instance
    def __reduce__(self) -> str: return "EMPTY"


class _Present(Maybe[A]):
    __slots__ = ("_value",)

    def __init__(self, value: A) -> None:
        if value is None:
            raise IllegalPresentValue()
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def fold(self, if_present: Callable[[A], B], if_empty: Callable[[], B]) -> B:
        return if_present(self._value)

    def __repr__(self) -> str: return f"present({self._value!r})"

    def __reduce__(self) -> Tuple[Callable[[A], Maybe[A]], Tuple[A]]:
        return present, (self._value,)


_sealed = True

EMPTY: Maybe[Any] = _Empty()


def empty() -> Maybe[A]:
    return EMPTY


def present(value: A) -> Maybe[A]:
    return _Present(value)


def from_nullable(value: Optional[A]) -> Maybe[A]:
    return present(value) if value is not None else EMPTY
