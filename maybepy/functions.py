from __future__ import annotations
from typing import Awaitable, Callable, Iterator, NoReturn, Type, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")

Supplier = Callable[[], A]
Mapper = Callable[[A], B]
# Same shape as Supplier; named separately because it is allowed to raise.
FallibleSupplier = Callable[[], A]
AsyncSupplier = Callable[[], Awaitable[A]]


def constant(value: A) -> Supplier[A]:
    def supply() -> A:
        return value
    return supply


def constant_mapper(value: B) -> Mapper[object, B]:
    def apply(_: object) -> B:
        return value
    return apply


def identity(value: A) -> A:
    return value


def raising(error: Union[BaseException, Type[BaseException]]) -> Callable[[], NoReturn]:
    def supply() -> NoReturn:
        raise error
    return supply


def single_element_iterator(value: A) -> Iterator[A]:
    yield value


def empty_iterator() -> Iterator[A]:
    return iter(())
