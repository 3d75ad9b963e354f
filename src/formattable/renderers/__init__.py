"""Renderers for composite format strings.

Provides:
- TemplateRenderer: protocol any renderer conforms to
- CompositeRenderer: reference implementation backed by ``format()``
"""

from formattable.renderers.composite import CompositeRenderer, render
from formattable.renderers.protocol import TemplateRenderer

__all__ = [
    "CompositeRenderer",
    "TemplateRenderer",
    "render",
]
