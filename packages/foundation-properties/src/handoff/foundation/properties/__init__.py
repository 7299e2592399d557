"""Handoff Foundation Properties -- typed values over a flat string store.

This package provides the typed encoding protocol used to hand configuration
from a parent process to a child: the ``tag|payload`` scalar codec, the list
and indexed sequence codecs, and the :class:`PropertiesWrapper` facade.
"""

from handoff.foundation.properties.classpath import Classpath
from handoff.foundation.properties.exceptions import (
    ClassResolutionError,
    CodecCorruptionError,
    InvalidArgumentError,
    NullItemError,
    PropertiesError,
    UnknownTypeError,
)
from handoff.foundation.properties.indexed import add_list, get_string_list
from handoff.foundation.properties.list_codec import decode_string_list, encode_string_list
from handoff.foundation.properties.propfile import (
    PropertyFileSyntaxError,
    dump_properties,
    load_properties,
    load_properties_bytes,
)
from handoff.foundation.properties.resolution import (
    ClassResolver,
    ImportlibClassResolver,
    class_name,
)
from handoff.foundation.properties.scalar_codec import (
    decode_payload,
    decode_value,
    encode_typed,
    encode_value,
)
from handoff.foundation.properties.values import (
    ClassReferenceValue,
    FilePathListValue,
    FilePathValue,
    FlagValue,
    StringListValue,
    SubPropertiesValue,
    TextValue,
    TypedValue,
    TypeTag,
    WholeNumberValue,
    typed_value,
)
from handoff.foundation.properties.wrapper import PropertiesWrapper

__all__ = [
    "ClassReferenceValue",
    "ClassResolutionError",
    "ClassResolver",
    "Classpath",
    "CodecCorruptionError",
    "FilePathListValue",
    "FilePathValue",
    "FlagValue",
    "ImportlibClassResolver",
    "InvalidArgumentError",
    "NullItemError",
    "PropertiesError",
    "PropertiesWrapper",
    "PropertyFileSyntaxError",
    "StringListValue",
    "SubPropertiesValue",
    "TextValue",
    "TypeTag",
    "TypedValue",
    "UnknownTypeError",
    "WholeNumberValue",
    "add_list",
    "class_name",
    "decode_payload",
    "decode_string_list",
    "decode_value",
    "dump_properties",
    "encode_string_list",
    "encode_typed",
    "encode_value",
    "get_string_list",
    "load_properties",
    "load_properties_bytes",
    "typed_value",
]
