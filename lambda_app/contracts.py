"""
Callable contracts.

Each contract is a Protocol with exactly one abstract operation, ``__call__``,
so any value of the contract's type can be invoked unambiguously. Lambdas,
nested functions, function and bound-method references, and classes used as
constructors all satisfy a contract structurally; a class may also subclass
the contract explicitly and implement ``__call__`` itself.
"""

import inspect
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, get_origin, runtime_checkable

if TYPE_CHECKING:
    from .models import User


class Combinable(Protocol):
    """Capability of values that can be combined with ``+``."""

    def __add__(self, other: Any) -> Any: ...


T = TypeVar("T", bound=Combinable)


@runtime_checkable
class Operation(Protocol):
    """Binary integer operation."""

    @abstractmethod
    def __call__(self, x: int, y: int) -> int: ...


@runtime_checkable
class OperationPlus(Protocol):
    """Nullary integer operation, typically a closure over enclosing state."""

    @abstractmethod
    def __call__(self) -> int: ...


@runtime_checkable
class OperationExecute(Protocol):
    """Binary integer operation returned by a selector."""

    @abstractmethod
    def __call__(self, x: int, y: int) -> int: ...


@runtime_checkable
class GenericOperation(Protocol[T]):
    """Binary operation over any payload type supporting ``+``."""

    @abstractmethod
    def __call__(self, x: T, y: T) -> T: ...


@runtime_checkable
class Expression(Protocol):
    """Integer predicate."""

    @abstractmethod
    def __call__(self, n: int) -> bool: ...


@runtime_checkable
class Printable(Protocol):
    """Consumer of a single line of text."""

    @abstractmethod
    def __call__(self, s: str) -> None: ...


@runtime_checkable
class UserBuilder(Protocol):
    """Factory building a User from a name."""

    @abstractmethod
    def __call__(self, name: str) -> "User": ...


ARITY: dict[type, int] = {
    Operation: 2,
    OperationPlus: 0,
    OperationExecute: 2,
    GenericOperation: 2,
    Expression: 1,
    Printable: 1,
    UserBuilder: 1,
}


def is_contract(value: Any, contract: type) -> bool:
    """
    Check that a value can be invoked through the given contract.

    The value must be callable and its signature must bind exactly the
    number of positional arguments the contract passes. Callables whose
    signature cannot be introspected (some builtins) are accepted.

    Args:
        value: Candidate callable value
        contract: One of the contract protocols in this module, optionally
            parameterized (``GenericOperation[int]``)

    Returns:
        True if the value satisfies the contract's shape
    """
    # GenericOperation[int] and friends check against the bare protocol
    base = get_origin(contract) or contract
    if base not in ARITY:
        raise TypeError(f"Unknown contract: {contract!r}")

    if not isinstance(value, base):
        return False

    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return True

    try:
        signature.bind(*([None] * ARITY[base]))
    except TypeError:
        return False
    return True
