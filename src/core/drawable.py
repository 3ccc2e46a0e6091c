from typing import Protocol, runtime_checkable

from render.primitives import Primitive


@runtime_checkable
class Canvas(Protocol):
    """Anything that can take a frame's primitives, in order, and show them."""

    def clear(self) -> None: ...

    def push(self, primitive: Primitive) -> None: ...

    def present(self) -> None: ...
