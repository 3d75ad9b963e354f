"""Fragment pieces accepted by FormattableStringBuilder.

A fragment is an ordered sequence of literal-text pieces and value pieces.
It stands in for an interpolated string: literal text is brace-escaped into
the template, each value becomes a numbered placeholder.

Piece forms:
    - ``Literal("text")`` or a plain ``str``: literal text
    - ``Value(obj, alignment=-5, format="X2")``: a captured argument
    - a template-string ``Interpolation`` (PEP 750): a captured argument

Example:
    >>> from formattable.fragments import Literal, Value
    >>> fragment = [Literal("Total: "), Value(42, alignment=6, format="d")]

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import Any, TypeAlias

from formattable.errors import MalformedFragmentError

_CONVERTERS = {"r": repr, "s": str, "a": ascii}


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal text, brace-escaped when appended.

    Attributes:
        text: The literal text
    """

    text: str


@dataclass(frozen=True, slots=True)
class Value:
    """A captured argument and its placeholder annotations.

    Attributes:
        value: Opaque payload stored in the argument list
        alignment: Minimum field width; negative left-justifies, 0 means none
        format: Format specifier text. None means absent; ``""`` is present
            and still emits a trailing colon.
    """

    value: Any
    alignment: int = 0
    format: str | None = None


Piece: TypeAlias = "Literal | Value | str"
Fragment: TypeAlias = "Iterable[Piece]"


def _is_interpolation(piece: object) -> bool:
    return all(hasattr(piece, name) for name in ("value", "expression", "conversion", "format_spec"))


def normalize_piece(piece: object, index: int | None = None) -> Literal | Value:
    """Convert one user-supplied piece into a validated Literal or Value.

    Args:
        piece: A Literal, Value, str or template-string Interpolation
        index: Position of the piece in its fragment (for error messages)

    Returns:
        The tagged piece

    Raises:
        MalformedFragmentError: If the piece has an unsupported type or
            invalid attributes
    """
    if isinstance(piece, str):
        return Literal(piece)

    if isinstance(piece, Literal):
        if not isinstance(piece.text, str):
            raise MalformedFragmentError(
                f"literal text must be str, got {type(piece.text).__name__}", index
            )
        return piece

    if isinstance(piece, Value):
        # bool is an int subclass but never a meaningful width
        if isinstance(piece.alignment, bool) or not isinstance(piece.alignment, int):
            raise MalformedFragmentError(
                f"alignment must be int, got {type(piece.alignment).__name__}", index
            )
        if piece.format is not None and not isinstance(piece.format, str):
            raise MalformedFragmentError(
                f"format must be str or None, got {type(piece.format).__name__}", index
            )
        return piece

    if _is_interpolation(piece):
        value = piece.value  # type: ignore[attr-defined]
        conversion = piece.conversion  # type: ignore[attr-defined]
        if conversion is not None:
            converter = _CONVERTERS.get(conversion)
            if converter is None:
                raise MalformedFragmentError(f"unknown conversion {conversion!r}", index)
            value = converter(value)
        format_spec = piece.format_spec  # type: ignore[attr-defined]
        return Value(value, format=format_spec or None)

    raise MalformedFragmentError(
        f"expected Literal, Value, str or Interpolation, got {type(piece).__name__}", index
    )


def normalize_fragment(fragment: Fragment) -> list[Literal | Value]:
    """Validate a whole fragment up front.

    Args:
        fragment: Iterable of pieces (a ``string.templatelib.Template`` qualifies)

    Returns:
        List of tagged pieces, in order

    Raises:
        MalformedFragmentError: If the fragment is not an ordered iterable of pieces
            or any piece is malformed
    """
    if isinstance(fragment, (str, bytes, Literal, Value)):
        raise MalformedFragmentError(
            f"fragment must be an iterable of pieces, got {type(fragment).__name__}"
        )
    if isinstance(fragment, (AbstractSet, Mapping)):
        raise MalformedFragmentError(
            f"fragment must be ordered, got {type(fragment).__name__}"
        )
    try:
        pieces = list(fragment)
    except TypeError as e:
        raise MalformedFragmentError(
            f"fragment must be an iterable of pieces, got {type(fragment).__name__}"
        ) from e
    return [normalize_piece(piece, i) for i, piece in enumerate(pieces)]


__all__ = [
    "Fragment",
    "Literal",
    "Piece",
    "Value",
    "normalize_fragment",
    "normalize_piece",
]
