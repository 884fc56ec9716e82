"""
Higher-order functions.

``sum_matching`` takes a predicate as an argument; ``action`` returns an
operation selected from a fixed dispatch table.
"""

import operator
from collections.abc import Iterable

import structlog

from .contracts import Expression, OperationExecute

logger = structlog.get_logger(__name__)


def sum_matching(numbers: Iterable[int], predicate: Expression) -> int:
    """
    Sum the numbers for which the predicate holds.

    Args:
        numbers: Integers to filter
        predicate: Expression deciding which numbers are summed

    Returns:
        Sum of matching numbers, 0 if none match
    """
    result = 0
    for number in numbers:
        if predicate(number):
            result += number
    return result


_constant_zero: OperationExecute = lambda x, y: 0  # noqa: E731

ACTIONS: dict[int, OperationExecute] = {
    1: operator.add,
    2: lambda x, y: x - y,
    3: lambda x, y: x * y,
}


def action(code: int) -> OperationExecute:
    """
    Select an operation by code.

    1 adds, 2 subtracts, 3 multiplies; any other code yields an operation
    that always returns 0.
    """
    selected = ACTIONS.get(code)
    if selected is None:
        logger.debug("Unknown action code, using constant zero", code=code)
        return _constant_zero
    return selected
