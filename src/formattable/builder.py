"""FormattableStringBuilder: incremental composite format string assembly.

Appends literal text and captured values to a growing template, writing a
numbered placeholder for every value. Parts accumulate in a list and are
joined once per ``build()`` call.

Example:
    >>> from formattable import FormattableStringBuilder, Value
    >>> fs = (
    ...     FormattableStringBuilder(line_terminator="\\n")
    ...     .append("INSERT INTO t (a) {x}")
    ...     .append_line()
    ...     .append("VALUES (", Value(1), ")")
    ...     .build()
    ... )
    >>> fs.format
    'INSERT INTO t (a) {{x}}\\nVALUES ({0})'
    >>> fs.arguments
    (1,)

Thread Safety:
    A builder has a single owner and no internal locking. Snapshots
    returned by ``build()`` are immutable and safe to share.

"""

from __future__ import annotations

from typing import Any

from formattable.config import get_builder_config
from formattable.errors import MalformedFragmentError
from formattable.formattable_string import FormattableString
from formattable.fragments import Fragment, Literal, Value, normalize_fragment
from formattable.utils.logger import get_logger
from formattable.utils.text import escape_braces

logger = get_logger(__name__)


class FormattableStringBuilder:
    """Mutable composite format string with a parallel argument list.

    The k-th value ever appended gets placeholder index k; the counter is
    shared across all append calls and never resets.
    """

    __slots__ = ("_arguments", "_line_terminator", "_parts")

    def __init__(self, *, line_terminator: str | None = None) -> None:
        """Initialize an empty builder.

        Args:
            line_terminator: Sequence written by ``append_line()``
                (None = the active BuilderConfig's terminator)

        Raises:
            TypeError: If line_terminator is not a str
        """
        if line_terminator is None:
            line_terminator = get_builder_config().line_terminator
        elif not isinstance(line_terminator, str):
            raise TypeError(
                f"line_terminator must be str, got {type(line_terminator).__name__}"
            )
        self._line_terminator = line_terminator
        self._parts: list[str] = []
        self._arguments: list[Any] = []

    @property
    def line_terminator(self) -> str:
        return self._line_terminator

    @property
    def argument_count(self) -> int:
        """Number of values captured so far (the next placeholder index)."""
        return len(self._arguments)

    def append_fragment(self, fragment: Fragment) -> FormattableStringBuilder:
        """Append an ordered mix of literal and value pieces.

        Literal text is brace-escaped. Each value writes
        ``{index[,alignment][:format]}`` and is added to the argument list.
        The whole fragment is validated before anything is written.

        Args:
            fragment: Iterable of Literal, Value, str or Interpolation pieces

        Returns:
            self for method chaining

        Raises:
            MalformedFragmentError: If the fragment or a piece is malformed;
                the builder is left unchanged
        """
        try:
            pieces = normalize_fragment(fragment)
        except MalformedFragmentError as e:
            logger.debug("Rejected fragment: %s", e)
            raise

        for piece in pieces:
            if isinstance(piece, Literal):
                if piece.text:
                    self._parts.append(escape_braces(piece.text))
            else:
                self._append_value(piece)
        return self

    def append(self, *pieces: Literal | Value | str) -> FormattableStringBuilder:
        """Append pieces given as positional arguments.

        Shorthand for ``append_fragment(pieces)``.

        Returns:
            self for method chaining
        """
        return self.append_fragment(pieces)

    def append_line(self) -> FormattableStringBuilder:
        """Append the line terminator, unescaped.

        Returns:
            self for method chaining
        """
        if self._line_terminator:
            self._parts.append(self._line_terminator)
        return self

    def build(self) -> FormattableString:
        """Snapshot the current template and arguments.

        The builder stays usable; later appends never affect the snapshot.
        """
        return FormattableString("".join(self._parts), tuple(self._arguments))

    def _append_value(self, piece: Value) -> None:
        placeholder = [f"{{{len(self._arguments)}"]
        if piece.alignment != 0:
            placeholder.append(f",{piece.alignment}")
        if piece.format is not None:
            placeholder.append(f":{piece.format}")
        placeholder.append("}")

        self._parts.append("".join(placeholder))
        self._arguments.append(piece.value)

    def __len__(self) -> int:
        """Return number of characters in the template so far."""
        return sum(len(part) for part in self._parts)

    def __bool__(self) -> bool:
        """Return True if anything has been appended."""
        return bool(self._parts)

    def __repr__(self) -> str:
        return f"<FormattableStringBuilder chars={len(self)} arguments={len(self._arguments)}>"
