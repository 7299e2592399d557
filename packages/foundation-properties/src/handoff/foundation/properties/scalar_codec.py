"""Scalar ``tag|payload`` encoding.

Every supported value is written as its :class:`TypeTag` string, a ``|``
separator, and a type-specific payload. Decoding reads the tag back and
dispatches through a closed table, one entry per tag.

Example:
    >>> from handoff.foundation.properties.values import TypeTag
    >>> encode_value(TypeTag.INTEGER, 42)
    'java.lang.Integer|42'
    >>> decode_value("java.lang.Integer|42").value
    42
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from handoff.foundation.properties.exceptions import CodecCorruptionError
from handoff.foundation.properties.list_codec import decode_string_list, encode_string_list
from handoff.foundation.properties.propfile import (
    PROPERTIES_ENCODING,
    PropertyFileSyntaxError,
    dump_properties,
    load_properties_bytes,
)
from handoff.foundation.properties.resolution import DEFAULT_RESOLVER, class_name
from handoff.foundation.properties.values import (
    ClassReferenceValue,
    FilePathListValue,
    FilePathValue,
    FlagValue,
    StringListValue,
    SubPropertiesValue,
    TextValue,
    TypeTag,
    WholeNumberValue,
    typed_value,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from handoff.foundation.properties.resolution import ClassResolver
    from handoff.foundation.properties.values import TypedValue

TYPE_SEPARATOR: str = "|"

_DECIMAL_INTEGER = re.compile(r"[+-]?\d+")


def _render_payload(typed: TypedValue) -> str:
    if isinstance(typed, TextValue):
        return typed.value
    if isinstance(typed, ClassReferenceValue):
        return class_name(typed.value)
    if isinstance(typed, FilePathValue):
        return str(typed.value)
    if isinstance(typed, FilePathListValue):
        return encode_string_list(str(path) for path in typed.value)
    if isinstance(typed, StringListValue):
        return encode_string_list(typed.value)
    if isinstance(typed, FlagValue):
        return "true" if typed.value else "false"
    if isinstance(typed, WholeNumberValue):
        return str(typed.value)
    if isinstance(typed, SubPropertiesValue):
        return dump_properties(typed.value)
    msg = f"Unsupported typed value: {type(typed).__name__}"
    raise TypeError(msg)


def encode_typed(typed: TypedValue) -> str:
    """Encode a typed value as ``tag|payload``."""
    return f"{typed.type}{TYPE_SEPARATOR}{_render_payload(typed)}"


def encode_value(tag: TypeTag | str, value: Any) -> str:
    """Encode ``value`` under an explicitly declared type tag.

    Args:
        tag: Declared type tag. The tag is never inferred from ``value``.
        value: Raw Python value matching the tag's variant.

    Returns:
        The ``tag|payload`` string.

    Raises:
        UnknownTypeError: If ``tag`` is not recognized.
        pydantic.ValidationError: If ``value`` does not fit the tag.
    """
    return encode_typed(typed_value(tag, value))


def _decode_text(payload: str, _resolver: ClassResolver) -> TypedValue:
    return TextValue(value=payload)


def _decode_class(payload: str, resolver: ClassResolver) -> TypedValue:
    return ClassReferenceValue(value=resolver.resolve(payload))


def _decode_file(payload: str, _resolver: ClassResolver) -> TypedValue:
    return FilePathValue(value=Path(payload))


def _decode_file_array(payload: str, _resolver: ClassResolver) -> TypedValue:
    return FilePathListValue(value=[Path(item) for item in decode_string_list(payload)])


def _decode_string_list(payload: str, _resolver: ClassResolver) -> TypedValue:
    return StringListValue(value=decode_string_list(payload))


def _decode_boolean(payload: str, _resolver: ClassResolver) -> TypedValue:
    return FlagValue(value=payload.lower() == "true")


def _decode_integer(payload: str, _resolver: ClassResolver) -> TypedValue:
    try:
        if _DECIMAL_INTEGER.fullmatch(payload) is None:
            msg = "payload is not a plain decimal integer"
            raise ValueError(msg)
        return WholeNumberValue(value=int(payload, 10))
    except (ValueError, PydanticValidationError) as exc:
        raise CodecCorruptionError(
            TypeTag.INTEGER, f"not a 32-bit integer: {payload!r}"
        ) from exc


def _decode_properties(payload: str, _resolver: ClassResolver) -> TypedValue:
    try:
        properties = load_properties_bytes(payload.encode(PROPERTIES_ENCODING))
    except (UnicodeEncodeError, PropertyFileSyntaxError) as exc:
        raise CodecCorruptionError(TypeTag.PROPERTIES, str(exc)) from exc
    return SubPropertiesValue(value=properties)


_DECODERS: dict[TypeTag, Callable[[str, ClassResolver], TypedValue]] = {
    TypeTag.STRING: _decode_text,
    TypeTag.CLASS: _decode_class,
    TypeTag.FILE: _decode_file,
    TypeTag.FILE_ARRAY: _decode_file_array,
    TypeTag.STRING_LIST: _decode_string_list,
    TypeTag.BOOLEAN: _decode_boolean,
    TypeTag.INTEGER: _decode_integer,
    TypeTag.PROPERTIES: _decode_properties,
}


def decode_payload(
    tag: TypeTag | str,
    payload: str,
    resolver: ClassResolver | None = None,
) -> TypedValue | None:
    """Decode a payload whose tag is already known.

    Args:
        tag: Type tag. A blank tag means "no value".
        payload: Payload text (everything after the separator).
        resolver: Class resolver for class references. Defaults to the
            importlib resolver.

    Returns:
        A freshly built typed value, or ``None`` for a blank tag.

    Raises:
        UnknownTypeError: If the tag is not recognized.
        ClassResolutionError: If a class reference cannot be resolved.
        CodecCorruptionError: If the payload cannot be parsed for its tag.
    """
    if not str(tag).strip():
        return None
    decoder = _DECODERS[TypeTag.parse(str(tag))]
    return decoder(payload, resolver or DEFAULT_RESOLVER)


def split_encoded(encoded: str) -> tuple[str, str]:
    """Split ``tag|payload`` at the first separator.

    A string without a separator is all tag, with an empty payload.
    """
    tag, _, payload = encoded.partition(TYPE_SEPARATOR)
    return tag, payload


def decode_value(encoded: str, resolver: ClassResolver | None = None) -> TypedValue | None:
    """Decode a ``tag|payload`` string.

    Args:
        encoded: Encoded value as written by :func:`encode_value`.
        resolver: Class resolver for class references.

    Returns:
        The typed value, or ``None`` when the tag is blank.

    Raises:
        UnknownTypeError: If the tag is not recognized.
        ClassResolutionError: If a class reference cannot be resolved.
        CodecCorruptionError: If the payload cannot be parsed for its tag.
    """
    tag, payload = split_encoded(encoded)
    return decode_payload(tag, payload, resolver)
