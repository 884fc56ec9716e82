"""
Arithmetic callable values.

The same ``Operation`` contract is satisfied here in every supported way:
inline lambdas, a block-bodied nested function, a reference to an existing
library function, and an explicit implementing class.
"""

import operator

from .contracts import GenericOperation, Operation

# Inline expression bodies
inline_addition: Operation = lambda x, y: x + y  # noqa: E731
plus: Operation = lambda x, y: x + y  # noqa: E731
minus: Operation = lambda x, y: x - y  # noqa: E731
multiply: Operation = lambda x, y: x * y  # noqa: E731

# Reference to an existing function
sum_reference: Operation = operator.add


class Addition(Operation):
    """Explicit implementation of the Operation contract."""

    def __call__(self, x: int, y: int) -> int:
        return x + y

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def divide(x: int, y: int) -> int:
    """Integer division that returns 0 for a zero divisor."""
    if y == 0:
        return 0
    # Truncate toward zero; Python's // floors.
    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        return -quotient
    return quotient


def generic_add() -> GenericOperation:
    """
    Return the generic addition operation.

    The body is the same for every payload type; ``int`` arguments are summed
    and ``str`` arguments are concatenated.
    """
    return lambda x, y: x + y


int_add: GenericOperation[int] = generic_add()
str_add: GenericOperation[str] = generic_add()
