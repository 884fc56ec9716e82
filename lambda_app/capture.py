"""
Closures over enclosing state.

Two kinds of captured state behave differently:

- Shared state lives for the whole process. Callables may read and write it,
  and a later, independent read observes the change.
- Local captures are snapshots taken when the callable is created. They are
  read-only for the lifetime of the capture; neither the callable nor the
  caller can change what the callable sees.
"""

import copy
from types import MappingProxyType
from typing import Any, Optional

import structlog

from .config.defaults import SharedStateParams, get_default_config
from .contracts import OperationPlus
from .errors import CaptureMutationError

logger = structlog.get_logger(__name__)


class SharedState:
    """Process-wide mutable counters, initialized once at startup."""

    def __init__(self, params: Optional[SharedStateParams] = None):
        self.initial = params or get_default_config().shared_state
        self.x = self.initial.x
        self.y = self.initial.y

    def reset(self, params: Optional[SharedStateParams] = None) -> None:
        """Restore the initial values, optionally replacing them first."""
        if params is not None:
            self.initial = params
        self.x = self.initial.x
        self.y = self.initial.y
        logger.debug("Shared state reset", x=self.x, y=self.y)

    def __repr__(self) -> str:
        return f"SharedState(x={self.x}, y={self.y})"


# Module-level instance for singleton usage
shared_state = SharedState()


def overwrite_and_add(new_x: int = 30, state: Optional[SharedState] = None) -> OperationPlus:
    """
    Return a callable that overwrites ``x`` in shared state and adds ``y``.

    The write is visible to every later reader of the shared state.
    """
    target = state if state is not None else shared_state

    def calculate() -> int:
        logger.debug("Overwriting shared x", old_x=target.x, new_x=new_x)
        target.x = new_x
        return target.x + target.y

    return calculate


def _snapshot(value: Any) -> Any:
    """Deep copy of a captured value, or the value itself if it cannot be copied."""
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        # Locks, open files, generators: the name binding stays frozen,
        # the object's own state is shared with the caller.
        return value


class FrozenScope:
    """
    Read-only snapshot of captured local values.

    Names can never be rebound or deleted. Values are deep-copied at capture
    time; values that cannot be copied are held by reference.
    """

    __slots__ = ("_values",)

    def __init__(self, values: dict[str, Any]):
        object.__setattr__(
            self, "_values",
            MappingProxyType({name: _snapshot(value) for name, value in values.items()})
        )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"No captured variable named '{name}'") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise CaptureMutationError(name, operation="assign")

    def __delattr__(self, name: str) -> None:
        raise CaptureMutationError(name, operation="delete")

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __reduce__(self):
        return (type(self), (dict(self._values),))

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"FrozenScope({inner})"


def capture(**values: Any) -> FrozenScope:
    """Snapshot the given local values for use inside a closure."""
    return FrozenScope(values)


def local_sum(n: int, m: int) -> OperationPlus:
    """Return a callable adding two captured locals."""
    scope = capture(n=n, m=m)
    return lambda: scope.m + scope.n
