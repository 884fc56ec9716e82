"""
Demonstration runner.

Runs every section in order, printing one line per step. Sections receive a
``DemoOutput`` that prints a value to the demo stream and logs the step.
"""

import sys
from collections.abc import Callable
from typing import Any, Optional, TextIO

from .capture import local_sum, overwrite_and_add, shared_state
from .contracts import (
    Expression,
    GenericOperation,
    Operation,
    OperationExecute,
    OperationPlus,
    Printable,
    UserBuilder,
)
from .higher_order import action, sum_matching
from .logging.config import get_demo_logger, log_step
from .models import user_builder
from .operations import (
    Addition,
    divide,
    inline_addition,
    int_add,
    minus,
    multiply,
    plus,
    str_add,
    sum_reference,
)
from .predicates import ExpressionHelper, InstanceExpressionHelper, greater_than
from .printing import make_printer, reference_printer

logger = get_demo_logger(__name__)


class DemoOutput:
    """Output stream of a demo run with per-step logging."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.section = ""
        self.printed = 0

    def __call__(self, value: Any) -> None:
        line = str(value)
        print(line, file=self.stream)
        self.record(line)

    def record(self, line: str) -> None:
        """Log a line that was already written to the stream."""
        self.printed += 1
        log_step(logger, self.section, self.printed, line)


def operation_variants(out: DemoOutput) -> None:
    """One contract, three ways to satisfy it."""
    operation: Operation = inline_addition
    out(operation(10, 5))

    operation2: Operation = Addition()
    out(operation2(3, 15))

    operation3: Operation = sum_reference
    out(operation3(10, 5))


def many_operations(out: DemoOutput) -> None:
    """Several lambdas for the same contract."""
    out(plus(20, 10))
    out(minus(20, 10))
    out(multiply(20, 10))


def terminal_lambdas(out: DemoOutput) -> None:
    """Callables that consume a value and return nothing."""
    printer: Printable = make_printer(out.stream)
    printer("Hello, Python!")
    out.record("Hello, Python!")

    printer2: Printable = reference_printer(out.stream)
    printer2("Hello, Python 3!")
    out.record("Hello, Python 3!")


def captured_variables(out: DemoOutput) -> None:
    """Shared state is writable from a closure; local captures are not."""
    operation_plus: OperationPlus = overwrite_and_add(30)
    out(operation_plus())
    out(shared_state.x)

    n = 70
    m = 30
    op: OperationPlus = local_sum(n, m)
    out(op())


def block_bodies(out: DemoOutput) -> None:
    """A block body with a guarded branch."""
    operation: Operation = divide
    out(operation(20, 10))
    out(operation(20, 0))


def generic_operations(out: DemoOutput) -> None:
    """One implementation text, two payload types."""
    go1: GenericOperation[int] = int_add
    go2: GenericOperation[str] = str_add
    out(go1(20, 10))
    out(go2("20", "10"))


def callables_as_arguments(out: DemoOutput) -> None:
    """Predicates passed into a higher-order function."""
    func: Expression = lambda number: number % 2 == 0  # noqa: E731
    nums = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    out(sum_matching(nums, func))

    out(sum_matching(nums, greater_than(5)))


def references_as_arguments(out: DemoOutput) -> None:
    """Function and bound-method references passed as predicates."""
    nums = [-5, -4, -3, -2, -1, 0, 1, 2, 3, 4, 5]
    out(sum_matching(nums, ExpressionHelper.is_even))

    expr: Expression = ExpressionHelper.is_positive
    out(sum_matching(nums, expr))

    helper = InstanceExpressionHelper()
    out(sum_matching(nums, helper.is_even))


def constructor_references(out: DemoOutput) -> None:
    """A class used as a factory."""
    builder: UserBuilder = user_builder
    user = builder("Tom")
    out(user.name)


def callables_as_results(out: DemoOutput) -> None:
    """Operations returned from a selector."""
    oe: OperationExecute = action(1)
    out(oe(6, 5))

    out(action(2)(8, 2))
    out(action(2)(8, 4))


SECTIONS: list[tuple[str, Callable[[DemoOutput], None]]] = [
    ("operation_variants", operation_variants),
    ("many_operations", many_operations),
    ("terminal_lambdas", terminal_lambdas),
    ("captured_variables", captured_variables),
    ("block_bodies", block_bodies),
    ("generic_operations", generic_operations),
    ("callables_as_arguments", callables_as_arguments),
    ("references_as_arguments", references_as_arguments),
    ("constructor_references", constructor_references),
    ("callables_as_results", callables_as_results),
]


def run_demo(stream: Optional[TextIO] = None) -> int:
    """
    Run all demonstration sections in order.

    Args:
        stream: Text stream receiving each output line, defaults to stdout

    Returns:
        Number of lines printed
    """
    out = DemoOutput(stream or sys.stdout)

    for section, run_section in SECTIONS:
        logger.info("Running section", section=section)
        out.section = section
        run_section(out)

    logger.info("Demo complete", lines=out.printed)
    return out.printed
