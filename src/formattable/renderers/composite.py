"""Reference renderer for composite format strings.

Understands the placeholder grammar written by FormattableStringBuilder:

    {index[,alignment][:formatSpec]}

with ``{{`` and ``}}`` as literal braces. Format specifiers are handed to
Python's ``format()`` untouched; alignment pads with spaces.

Example:
    >>> CompositeRenderer().render("{0,-4}|{1:>3}|{{x}}", ["ab", 7])
    'ab  |  7|{x}'
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from formattable.errors import RenderError
from formattable.utils.logger import get_logger

logger = get_logger(__name__)

_DIGITS = frozenset("0123456789")


class CompositeRenderer:
    """Render composite format strings with Python formatting.

    Stateless; a single instance may be shared.
    """

    __slots__ = ()

    def render(self, format: str, arguments: Sequence[Any]) -> str:
        """Render a composite format string.

        Args:
            format: Composite format string
            arguments: Argument list referenced by placeholder index

        Returns:
            Rendered text

        Raises:
            RenderError: On malformed syntax, an out-of-range index, or an
                argument whose ``__format__`` rejects its format specifier
        """
        parts: list[str] = []
        pos = 0
        end = len(format)

        while pos < end:
            brace = _next_brace(format, pos)
            if brace < 0:
                parts.append(format[pos:])
                break
            if brace > pos:
                parts.append(format[pos:brace])

            char = format[brace]
            if brace + 1 < end and format[brace + 1] == char:
                parts.append(char)
                pos = brace + 2
                continue
            if char == "}":
                raise RenderError("unmatched '}' in format string", brace)

            pos = self._render_item(format, brace, arguments, parts)

        return "".join(parts)

    def _render_item(
        self, format: str, start: int, arguments: Sequence[Any], parts: list[str]
    ) -> int:
        """Render the format item opening at ``start``; return the offset past it."""
        end = len(format)
        pos = start + 1

        digits_start = pos
        while pos < end and format[pos] in _DIGITS:
            pos += 1
        if pos == digits_start:
            raise RenderError("expected argument index after '{'", pos)
        index = int(format[digits_start:pos])
        if index >= len(arguments):
            raise RenderError(
                f"index {index} is out of range for {len(arguments)} argument(s)", digits_start
            )
        pos = _skip_spaces(format, pos)

        alignment = 0
        if pos < end and format[pos] == ",":
            pos = _skip_spaces(format, pos + 1)
            number_start = pos
            if pos < end and format[pos] == "-":
                pos += 1
            digits_start = pos
            while pos < end and format[pos] in _DIGITS:
                pos += 1
            if pos == digits_start:
                raise RenderError("expected alignment after ','", pos)
            alignment = int(format[number_start:pos])
            pos = _skip_spaces(format, pos)

        spec = ""
        if pos < end and format[pos] == ":":
            spec_start = pos + 1
            close = format.find("}", spec_start)
            if close < 0:
                raise RenderError("unterminated format item", start)
            spec = format[spec_start:close]
            if "{" in spec:
                raise RenderError("unexpected '{' in format specifier", spec_start + spec.index("{"))
            pos = close

        if pos >= end or format[pos] != "}":
            raise RenderError("unterminated format item", start)

        text = _format_argument(arguments[index], spec, index)
        width = abs(alignment)
        if len(text) < width:
            text = text.rjust(width) if alignment > 0 else text.ljust(width)
        parts.append(text)
        return pos + 1


def _next_brace(text: str, pos: int) -> int:
    opening = text.find("{", pos)
    closing = text.find("}", pos)
    if opening < 0:
        return closing
    if closing < 0:
        return opening
    return min(opening, closing)


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] == " ":
        pos += 1
    return pos


def _format_argument(value: Any, spec: str, index: int) -> str:
    if value is None:
        return ""
    try:
        return format(value, spec)
    except (TypeError, ValueError) as e:
        logger.debug("Formatting argument %d with spec %r failed", index, spec, exc_info=True)
        raise RenderError(f"cannot format argument {index} with {spec!r}: {e}") from e


_DEFAULT_RENDERER = CompositeRenderer()


def render(format: str, arguments: Sequence[Any]) -> str:
    """Render with the shared default CompositeRenderer."""
    return _DEFAULT_RENDERER.render(format, arguments)
