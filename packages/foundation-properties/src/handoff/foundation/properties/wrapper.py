"""Typed view over a flat string-to-string property store.

:class:`PropertiesWrapper` owns the raw mapping and offers typed getters and
setters built from the scalar, list and indexed sequence codecs. The raw
mapping is what actually crosses the process boundary; the wrapper is used
on both sides to write and read it.

Example:
    Parent side::

        wrapper = PropertiesWrapper()
        wrapper.set_type_encoded("provider.class", TypeTag.CLASS, MyProvider)
        wrapper.set_property("fail.if.empty", True)
        wrapper.set_classpath("classpath.", classpath)
        send(wrapper.properties)

    Child side::

        wrapper = PropertiesWrapper(received)
        provider = wrapper.get_type_decoded("provider.class")
        fail_if_empty = wrapper.get_boolean_property("fail.if.empty")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from handoff.foundation.properties import indexed
from handoff.foundation.properties.classpath import Classpath
from handoff.foundation.properties.exceptions import InvalidArgumentError
from handoff.foundation.properties.scalar_codec import (
    decode_payload,
    decode_value,
    encode_typed,
    encode_value,
)
from handoff.foundation.properties.values import TypeTag

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping
    from pathlib import Path, PurePath

    from handoff.foundation.properties.resolution import ClassResolver
    from handoff.foundation.properties.values import TypedValue

_UNSET: Any = object()


class PropertiesWrapper:
    """Typed accessors over a raw ``str -> str`` mapping.

    Setters never write ``None``: passing ``None`` leaves the key untouched,
    so "unset" and "never set" look the same in the raw store.

    Args:
        properties: Backing mapping. Omit it to start from an empty dict.
        resolver: Resolver used when decoding class references. Defaults to
            the importlib resolver.

    Raises:
        InvalidArgumentError: If ``properties`` is explicitly ``None``.
    """

    def __init__(
        self,
        properties: MutableMapping[str, str] | None = _UNSET,
        resolver: ClassResolver | None = None,
    ) -> None:
        if properties is _UNSET:
            properties = {}
        if properties is None:
            msg = "Properties cannot be None"
            raise InvalidArgumentError(msg, context={"argument": "properties"})
        self._properties = properties
        self._resolver = resolver

    @property
    def properties(self) -> MutableMapping[str, str]:
        """The raw backing mapping."""
        return self._properties

    def get_property(self, key: str) -> str | None:
        return self._properties.get(key)

    def set_property(self, key: str, value: str | PurePath | bool | int | None) -> None:
        """Store ``value``'s string form under ``key``.

        Booleans are written as ``"true"``/``"false"``. ``None`` is a no-op.
        """
        if value is None:
            return
        if isinstance(value, bool):
            self._properties[key] = "true" if value else "false"
        else:
            self._properties[key] = str(value)

    def get_boolean_property(self, key: str) -> bool:
        """Return the flag under ``key``; an absent key reads as ``False``."""
        return (self.get_property(key) or "").lower() == "true"

    def get_boolean_object_property(self, key: str) -> bool | None:
        """Return the flag under ``key``, or ``None`` when absent."""
        value = self.get_property(key)
        if value is None:
            return None
        return value.lower() == "true"

    def get_integer_property(self, key: str) -> int | None:
        """Return the integer under ``key``, or ``None`` when absent.

        Raises:
            CodecCorruptionError: If the stored text is not a 32-bit integer.
        """
        value = self.get_property(key)
        if value is None:
            return None
        return decode_payload(TypeTag.INTEGER, value).value  # type: ignore[union-attr]

    def get_file_property(self, key: str) -> Path | None:
        """Return the path stored under ``key``, or ``None`` when absent."""
        value = self.get_property(key)
        if value is None:
            return None
        return decode_payload(TypeTag.FILE, value).value  # type: ignore[union-attr]

    def get_typed_value(self, key: str) -> TypedValue | None:
        """Decode the ``tag|payload`` value under ``key``.

        Returns:
            The typed value, or ``None`` if the key is absent or its tag blank.

        Raises:
            UnknownTypeError: If the stored tag is not recognized.
            ClassResolutionError: If a class reference cannot be resolved.
            CodecCorruptionError: If the payload cannot be parsed.
        """
        encoded = self.get_property(key)
        if encoded is None:
            return None
        return decode_value(encoded, self._resolver)

    def get_type_decoded(self, key: str) -> Any:
        """Decode the value under ``key`` to a plain Python object.

        Returns ``str``, ``type``, ``Path``, ``list[Path]``, ``list[str]``,
        ``bool``, ``int`` or ``dict[str, str]`` depending on the stored tag,
        or ``None`` if the key is absent or its tag blank.
        """
        typed = self.get_typed_value(key)
        return None if typed is None else typed.value

    def set_typed_value(self, key: str, typed: TypedValue | None) -> None:
        if typed is not None:
            self._properties[key] = encode_typed(typed)

    def set_type_encoded(self, key: str, tag: TypeTag | str, value: Any) -> None:
        """Encode ``value`` under the declared ``tag`` and store it.

        ``None`` is a no-op.

        Raises:
            UnknownTypeError: If ``tag`` is not recognized.
        """
        if value is not None:
            self._properties[key] = encode_value(tag, value)

    def get_string_list(self, prefix: str) -> list[str]:
        return indexed.get_string_list(self._properties, prefix)

    def add_list(self, items: Iterable[Any] | None, prefix: str) -> None:
        """Store ``items`` as a comma-flattened indexed sequence.

        Raises:
            NullItemError: If any item is ``None``.
        """
        indexed.add_list(self._properties, items, prefix)

    def get_classpath(self, prefix: str) -> Classpath:
        return Classpath(tuple(self.get_string_list(prefix)))

    def set_classpath(self, prefix: str, classpath: Classpath) -> None:
        """Store each classpath element under ``prefix0``, ``prefix1``, ..."""
        for index, element in enumerate(classpath.get_class_path()):
            self.set_property(indexed.indexed_key(prefix, index), element)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._properties)} properties)"
