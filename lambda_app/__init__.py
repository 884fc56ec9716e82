"""
Lambda App - Function Values Demonstration

An educational walkthrough of callables as first-class values: lambdas,
block-bodied functions, function and bound-method references, constructor
references, closures over shared and frozen state, generic callable types,
and higher-order functions that take or return callables.
"""

__version__ = "0.1.0"
__author__ = "Lambda App Team"
