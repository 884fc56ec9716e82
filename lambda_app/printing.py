"""Printable callable values writing lines to a text stream."""

import sys
from functools import partial
from typing import Optional, TextIO

from .contracts import Printable


def make_printer(stream: Optional[TextIO] = None) -> Printable:
    """Inline printer writing each line followed by a newline."""
    target = stream or sys.stdout
    return lambda s: print(s, file=target)


def reference_printer(stream: Optional[TextIO] = None) -> Printable:
    """Printer that is a reference to ``print`` bound to the stream."""
    return partial(print, file=stream or sys.stdout)
