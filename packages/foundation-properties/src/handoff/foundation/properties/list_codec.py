"""Single-string encoding of ordered string lists.

Elements are joined with ``,``. Decoding splits on ``,`` and trims each
element, so an element that itself contains a comma does not survive the
round trip. That limitation is part of the wire format and is kept for
compatibility with existing producers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

LIST_SEPARATOR: str = ","


def encode_string_list(items: Iterable[str]) -> str:
    """Join ``items`` with the list separator. No brackets are added."""
    return LIST_SEPARATOR.join(items)


def decode_string_list(text: str) -> list[str]:
    """Split an encoded list back into its elements.

    A value wrapped in ``[`` and ``]`` (as some producers render lists) has
    the brackets removed first. ``""`` decodes to ``[""]``.

    Args:
        text: Encoded list.

    Returns:
        Trimmed elements, in order.

    Example:
        >>> decode_string_list("[x, y]")
        ['x', 'y']
    """
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]
    return [element.strip() for element in text.split(LIST_SEPARATOR)]
