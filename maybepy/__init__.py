from .errors import MaybeError, IllegalPresentValue
from .functions import (
    Supplier,
    Mapper,
    FallibleSupplier,
    AsyncSupplier,
    constant,
    constant_mapper,
    identity,
    raising,
    single_element_iterator,
    empty_iterator,
)
from .maybe import Maybe, EMPTY, empty, present, from_nullable
