"""Style object graph consumed by the rendering engine.

Loading a style from its XML source is done elsewhere; the engine only
needs the macro table, the optional locale override, and render steps
that know how to write into a RenderContext.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cslengine.model.locale import Locale
    from cslengine.runtime.render_context import RenderContext

__all__ = ["Macro", "RenderFn", "RenderStep", "Style"]

type RenderFn = Callable[[RenderContext], None]
"""A function that writes rendered tokens into the context it is given."""


class RenderStep(Protocol):
    """A node of the style tree."""

    def render(self, ctx: RenderContext) -> None:
        """Write this node's output into ctx."""
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class Macro:
    """Named, reusable sequence of render steps."""

    name: str
    children: tuple[RenderStep, ...] = ()

    def render(self, ctx: RenderContext) -> None:
        for child in self.children:
            child.render(ctx)


@dataclass(frozen=True, slots=True, eq=False)
class Style:
    """Rendering rules shared by every context of a render batch.

    Attributes:
        macros: Macros by name
        locale: Locale override declared inside the style, if any
    """

    macros: Mapping[str, Macro] = field(default_factory=dict)
    locale: Locale | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "macros", MappingProxyType(dict(self.macros)))

    @classmethod
    def from_macros(cls, macros: Sequence[Macro], locale: Locale | None = None) -> Style:
        """Build a style from a sequence of macros, keyed by their names."""
        return cls({m.name: m for m in macros}, locale)
