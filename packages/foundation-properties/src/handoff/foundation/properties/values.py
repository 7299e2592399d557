"""Typed property values.

Uses a Pydantic discriminated union over a closed set of value types. The
``type`` field on each variant holds its :class:`TypeTag`, which is also the
tag written in front of the encoded payload on the wire.

Example:
    Building a value from a tag and a raw Python value::

        from handoff.foundation.properties.values import TypeTag, typed_value

        flag = typed_value(TypeTag.BOOLEAN, True)
        assert flag.value is True
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from handoff.foundation.properties.exceptions import UnknownTypeError

INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1

AnyClass = type[Any]


class TypeTag(StrEnum):
    """Closed set of wire type tags.

    The string values are the interop contract with existing producers and
    must never change.
    """

    STRING = "java.lang.String"
    CLASS = "java.lang.Class"
    FILE = "java.io.File"
    FILE_ARRAY = "[Ljava.io.File;"
    STRING_LIST = "java.util.ArrayList"
    BOOLEAN = "java.lang.Boolean"
    INTEGER = "java.lang.Integer"
    PROPERTIES = "java.util.Properties"

    @classmethod
    def parse(cls, tag: str) -> TypeTag:
        """Look up a tag by its exact wire string.

        Raises:
            UnknownTypeError: If ``tag`` is not one of the recognized tags.
        """
        try:
            return cls(tag)
        except ValueError as exc:
            raise UnknownTypeError(tag) from exc


class _TypedValueBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextValue(_TypedValueBase):
    """Plain text."""

    type: Literal[TypeTag.STRING] = TypeTag.STRING
    value: str


class ClassReferenceValue(_TypedValueBase):
    """Reference to a class, carried on the wire by its qualified name."""

    type: Literal[TypeTag.CLASS] = TypeTag.CLASS
    value: AnyClass


class FilePathValue(_TypedValueBase):
    """A single filesystem path."""

    type: Literal[TypeTag.FILE] = TypeTag.FILE
    value: Path


class FilePathListValue(_TypedValueBase):
    """Ordered filesystem paths."""

    type: Literal[TypeTag.FILE_ARRAY] = TypeTag.FILE_ARRAY
    value: list[Path]


class StringListValue(_TypedValueBase):
    """Ordered strings."""

    type: Literal[TypeTag.STRING_LIST] = TypeTag.STRING_LIST
    value: list[str]


class FlagValue(_TypedValueBase):
    """Boolean flag."""

    type: Literal[TypeTag.BOOLEAN] = TypeTag.BOOLEAN
    value: bool


class WholeNumberValue(_TypedValueBase):
    """Signed 32-bit integer."""

    type: Literal[TypeTag.INTEGER] = TypeTag.INTEGER
    value: int = Field(ge=INT_MIN, le=INT_MAX)


class SubPropertiesValue(_TypedValueBase):
    """Nested string-to-string properties."""

    type: Literal[TypeTag.PROPERTIES] = TypeTag.PROPERTIES
    value: dict[str, str]


TypedValue = Annotated[
    TextValue
    | ClassReferenceValue
    | FilePathValue
    | FilePathListValue
    | StringListValue
    | FlagValue
    | WholeNumberValue
    | SubPropertiesValue,
    Field(discriminator="type"),
]
"""Discriminated union of all supported property value types.

The ``type`` field on each variant acts as the discriminator.
"""

_TYPED_VALUE_ADAPTER: TypeAdapter[TypedValue] = TypeAdapter(TypedValue)


def typed_value(tag: TypeTag | str, value: Any) -> TypedValue:
    """Build the typed value variant selected by ``tag``.

    Args:
        tag: Wire type tag, as a :class:`TypeTag` or its exact string.
        value: Raw Python value for that variant.

    Returns:
        The validated, frozen variant instance.

    Raises:
        UnknownTypeError: If ``tag`` is not recognized.
        pydantic.ValidationError: If ``value`` does not fit the variant.
    """
    resolved = TypeTag.parse(str(tag))
    return _TYPED_VALUE_ADAPTER.validate_python({"type": resolved, "value": value})
