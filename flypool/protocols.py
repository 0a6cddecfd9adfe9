"""
flypool Protocols - Flyweight Interface Definitions
===================================================

Protocol-based interfaces for the objects a pool hands out and the extrinsic
context they are given at call time.

- `Flyweight.describe(context)` - act on extrinsic state without storing it
- `TableContext.table` - the per-order table number

These are structural types: a class satisfies them by shape, and the check is
done by the type checker rather than by probing attributes at runtime.
"""

from typing import Protocol, TypeVar

C = TypeVar("C", contravariant=True)


class Flyweight(Protocol[C]):
    """
    Protocol for a shared object holding only intrinsic state.

    Implementations must be effectively immutable. `describe` is a pure
    function of the instance's intrinsic state and the supplied context.
    """

    def describe(self, context: C) -> str:
        """Produce a description combining intrinsic state with `context`."""
        ...


class TableContext(Protocol):
    """Extrinsic state for a single order: the table it is served to."""

    @property
    def table(self) -> int: ...
