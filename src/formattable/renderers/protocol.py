"""TemplateRenderer protocol — stable interface for composite-format renderers.

Any renderer that implements ``render(format, arguments) -> str`` conforms to
this protocol. The built-in ``CompositeRenderer`` is the reference
implementation. Builders never call a renderer; only snapshots do.

Example:
    from formattable.renderers.protocol import TemplateRenderer

    def to_text(renderer: TemplateRenderer, fs: FormattableString) -> str:
        return fs.render(renderer)

"""

from collections.abc import Sequence
from typing import Any, Protocol


class TemplateRenderer(Protocol):
    """Protocol for composite-format renderers."""

    def render(self, format: str, arguments: Sequence[Any]) -> str:
        """Substitute arguments into a composite format string.

        Args:
            format: Template with ``{index[,alignment][:formatSpec]}`` items
            arguments: Values referenced by index

        Returns:
            Rendered string output.

        """
        ...
