"""Integer predicates satisfying the Expression contract."""

from .contracts import Expression


class ExpressionHelper:
    """Static predicates, passed around as plain function references."""

    @staticmethod
    def is_even(n: int) -> bool:
        return n % 2 == 0

    @staticmethod
    def is_positive(n: int) -> bool:
        return n > 0


class InstanceExpressionHelper:
    """Instance predicates, passed around as bound-method references."""

    def is_even(self, n: int) -> bool:
        return n % 2 == 0


def greater_than(limit: int) -> Expression:
    """Return a predicate that holds for numbers strictly above ``limit``."""
    return lambda n: n > limit
