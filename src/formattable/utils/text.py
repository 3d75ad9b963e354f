"""Text helpers for composite format strings.

Example:
    >>> from formattable.utils.text import escape_braces
    >>> escape_braces("{a} }")
    '{{a}} }}'
"""

from __future__ import annotations

_BRACE_ESCAPES = str.maketrans({"{": "{{", "}": "}}"})


def escape_braces(text: str) -> str:
    """Double every brace so the text survives as literal composite-format text.

    Args:
        text: Literal text

    Returns:
        Text with each ``{`` written as ``{{`` and each ``}`` as ``}}``

    Examples:
        >>> escape_braces("{{b}}")
        '{{{{b}}}}'
        >>> escape_braces("plain")
        'plain'
    """
    return text.translate(_BRACE_ESCAPES)
