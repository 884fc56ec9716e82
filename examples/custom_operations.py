#!/usr/bin/env python3
"""
Custom Operations Example - Lambda App

Shows how your own callables plug into the library's contracts:
- a lambda and a nested function as predicates for sum_matching
- a class implementing Operation explicitly
- a dispatch table lookup with the zero fallback

Run: python examples/custom_operations.py
"""

from lambda_app.contracts import Expression, Operation, is_contract
from lambda_app.higher_order import action, sum_matching
from lambda_app.logging import configure_logging


class Power(Operation):
    """x raised to y."""

    def __call__(self, x: int, y: int) -> int:
        return x ** y


def main():
    configure_logging(level="DEBUG")

    def divisible_by_three(n: int) -> bool:
        return n % 3 == 0

    numbers = list(range(1, 13))
    predicates: dict[str, Expression] = {
        "odd": lambda n: n % 2 == 1,
        "divisible by 3": divisible_by_three,
    }
    for label, predicate in predicates.items():
        print(f"sum of {label} numbers in 1..12: {sum_matching(numbers, predicate)}")

    power = Power()
    print(f"Power satisfies Operation: {is_contract(power, Operation)}")
    print(f"2 ** 10 = {power(2, 10)}")

    for code in (1, 2, 3, 9):
        print(f"action({code})(7, 3) = {action(code)(7, 3)}")


if __name__ == "__main__":
    main()
