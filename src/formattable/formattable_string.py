"""FormattableString: an immutable composite format string and its arguments.

Produced by ``FormattableStringBuilder.build()``. The snapshot shares no
mutable state with the builder that produced it.

Example:
    >>> fs = FormattableString("{0,3}|{1}", (7, "x"))
    >>> fs.argument_count
    2
    >>> str(fs)
    '  7|x'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from formattable.renderers.composite import render as _default_render

if TYPE_CHECKING:
    from formattable.renderers.protocol import TemplateRenderer


@dataclass(frozen=True, slots=True)
class FormattableString:
    """Composite format string plus its ordered, fixed-length argument list.

    Attributes:
        format: Template text with ``{index[,alignment][:formatSpec]}`` items
        arguments: Captured values, placeholder ``{k}`` refers to ``arguments[k]``
    """

    format: str
    arguments: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.arguments, tuple):
            object.__setattr__(self, "arguments", tuple(self.arguments))

    @property
    def argument_count(self) -> int:
        """Number of captured arguments."""
        return len(self.arguments)

    def get_argument(self, index: int) -> Any:
        """Return the argument at ``index`` (raises IndexError when out of range)."""
        return self.arguments[index]

    def get_arguments(self) -> tuple[Any, ...]:
        """Return the arguments in placeholder order."""
        return self.arguments

    def render(self, renderer: TemplateRenderer | None = None) -> str:
        """Render the template with its arguments.

        Args:
            renderer: Renderer to use (defaults to CompositeRenderer)

        Returns:
            Rendered text

        Raises:
            RenderError: If the template or an argument cannot be rendered
        """
        if renderer is None:
            return _default_render(self.format, self.arguments)
        return renderer.render(self.format, self.arguments)

    def __str__(self) -> str:
        return self.render()

    def __format__(self, spec: str) -> str:
        return format(self.render(), spec)
