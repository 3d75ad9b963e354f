"""
formattable — Incremental composite format strings for Python

Builds a composite format template (``{0}``, ``{0,-5}``, ``{0:X}``) together
with its ordered argument list, one fragment at a time. Literal braces are
escaped, every captured value gets the next placeholder index, and the result
is an immutable FormattableString ready for a renderer.

Quick Start:
    >>> from formattable import FormattableStringBuilder, Value
    >>> fsb = FormattableStringBuilder(line_terminator="\\n")
    >>> fs = fsb.append("{id}: ", Value(7, alignment=3)).append_line().build()
    >>> fs.format
    '{{id}}: {0,3}\\n'
    >>> fs.render()
    '{id}:   7\\n'

Template strings (Python 3.14+) can be appended directly:
    fsb.append_fragment(t"VALUES ({today:%Y-%m-%d})")
"""

from formattable.builder import FormattableStringBuilder
from formattable.config import (
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from formattable.errors import FormattableError, MalformedFragmentError, RenderError
from formattable.formattable_string import FormattableString
from formattable.fragments import Fragment, Literal, Piece, Value
from formattable.renderers import CompositeRenderer, TemplateRenderer
from formattable.utils.text import escape_braces

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "CompositeRenderer",
    "FormattableError",
    "FormattableString",
    "FormattableStringBuilder",
    "Fragment",
    "Literal",
    "MalformedFragmentError",
    "Piece",
    "RenderError",
    "TemplateRenderer",
    "Value",
    "builder_config_context",
    "escape_braces",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
