"""Tests for the ``tag|payload`` scalar codec."""

from __future__ import annotations

from fractions import Fraction
from pathlib import Path
from typing import Any

import pytest

from handoff.foundation.properties.exceptions import (
    ClassResolutionError,
    CodecCorruptionError,
    UnknownTypeError,
)
from handoff.foundation.properties.scalar_codec import (
    decode_payload,
    decode_value,
    encode_typed,
    encode_value,
    split_encoded,
)
from handoff.foundation.properties.values import (
    ClassReferenceValue,
    FilePathListValue,
    FlagValue,
    SubPropertiesValue,
    TextValue,
    TypeTag,
    WholeNumberValue,
    typed_value,
)


class _StubResolver:
    def __init__(self, classes: dict[str, type]) -> None:
        self.classes = classes
        self.requested: list[str] = []

    def resolve(self, name: str) -> type:
        self.requested.append(name)
        try:
            return self.classes[name]
        except KeyError as exc:
            raise ClassResolutionError(name, "not registered") from exc


@pytest.mark.unit
class TestEncodeValue:
    def test_text(self) -> None:
        assert encode_value(TypeTag.STRING, "hello") == "java.lang.String|hello"

    def test_text_is_not_transformed(self) -> None:
        assert encode_value(TypeTag.STRING, " a|b, c ") == "java.lang.String| a|b, c "

    def test_class(self) -> None:
        assert encode_value(TypeTag.CLASS, Fraction) == "java.lang.Class|fractions.Fraction"

    def test_file(self) -> None:
        assert encode_value(TypeTag.FILE, Path("target") / "classes") == (
            f"java.io.File|{Path('target') / 'classes'}"
        )

    def test_file_array(self) -> None:
        assert encode_value(TypeTag.FILE_ARRAY, ["a.jar", "b.jar"]) == "[Ljava.io.File;|a.jar,b.jar"

    def test_string_list(self) -> None:
        assert encode_value(TypeTag.STRING_LIST, ["x", "y"]) == "java.util.ArrayList|x,y"

    def test_boolean(self) -> None:
        assert encode_value(TypeTag.BOOLEAN, True) == "java.lang.Boolean|true"
        assert encode_value(TypeTag.BOOLEAN, False) == "java.lang.Boolean|false"

    def test_integer(self) -> None:
        assert encode_value(TypeTag.INTEGER, -12) == "java.lang.Integer|-12"

    def test_properties(self) -> None:
        assert encode_value(TypeTag.PROPERTIES, {"a": "1"}) == "java.util.Properties|a=1\n"

    def test_tag_given_as_string(self) -> None:
        assert encode_value("java.lang.Integer", 3) == "java.lang.Integer|3"

    def test_unknown_tag(self) -> None:
        with pytest.raises(UnknownTypeError, match="mystery"):
            encode_value("mystery", "x")


@pytest.mark.unit
class TestDecodeValue:
    def test_unknown_tag_names_tag(self) -> None:
        with pytest.raises(UnknownTypeError) as exc_info:
            decode_value("mystery|x")
        assert exc_info.value.tag == "mystery"

    @pytest.mark.parametrize("encoded", ["|x", "   |x", "", "  "])
    def test_blank_tag_is_absence(self, encoded: str) -> None:
        assert decode_value(encoded) is None

    def test_missing_separator_is_all_tag(self) -> None:
        assert split_encoded("java.lang.String") == ("java.lang.String", "")
        assert decode_value("java.lang.String") == TextValue(value="")

    def test_splits_at_first_separator(self) -> None:
        assert decode_value("java.lang.String|a|b") == TextValue(value="a|b")

    def test_boolean_is_case_insensitive(self) -> None:
        assert decode_value("java.lang.Boolean|TRUE") == FlagValue(value=True)

    def test_boolean_other_text_is_false(self) -> None:
        assert decode_value("java.lang.Boolean|yes") == FlagValue(value=False)

    def test_integer(self) -> None:
        assert decode_value("java.lang.Integer|2147483647") == WholeNumberValue(value=2**31 - 1)

    @pytest.mark.parametrize(
        "payload", ["abc", "", "2147483648", "1.5", "1_000", " 7 ", "0x10", "7\n"]
    )
    def test_bad_integer_is_corruption(self, payload: str) -> None:
        with pytest.raises(CodecCorruptionError) as exc_info:
            decode_value(f"java.lang.Integer|{payload}")
        assert exc_info.value.__cause__ is not None

    @pytest.mark.parametrize(("payload", "expected"), [("+5", 5), ("-12", -12), ("007", 7)])
    def test_signed_and_padded_integers(self, payload: str, expected: int) -> None:
        assert decode_value(f"java.lang.Integer|{payload}") == WholeNumberValue(value=expected)

    def test_file_array_tolerates_brackets(self) -> None:
        decoded = decode_value("[Ljava.io.File;|[a.jar, b.jar]")
        assert decoded == FilePathListValue(value=[Path("a.jar"), Path("b.jar")])

    def test_string_list_empty_payload(self) -> None:
        assert decode_value("java.util.ArrayList|").value == [""]  # type: ignore[union-attr]

    def test_properties_with_escapes(self) -> None:
        decoded = decode_value("java.util.Properties|# header\nk\\ 1=v\\u00e9\nother:2\n")
        assert decoded == SubPropertiesValue(value={"k 1": "vé", "other": "2"})

    def test_properties_non_latin1_payload_is_corruption(self) -> None:
        with pytest.raises(CodecCorruptionError) as exc_info:
            decode_value("java.util.Properties|k=€")
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    def test_properties_malformed_escape_is_corruption(self) -> None:
        with pytest.raises(CodecCorruptionError) as exc_info:
            decode_value("java.util.Properties|k=\\uXYZ1")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_class_uses_supplied_resolver(self) -> None:
        resolver = _StubResolver({"my.Provider": dict})
        decoded = decode_value("java.lang.Class|my.Provider", resolver)
        assert decoded == ClassReferenceValue(value=dict)
        assert resolver.requested == ["my.Provider"]

    def test_class_default_resolver(self) -> None:
        assert decode_value("java.lang.Class|fractions.Fraction") == ClassReferenceValue(
            value=Fraction
        )

    def test_class_unresolvable(self) -> None:
        with pytest.raises(ClassResolutionError):
            decode_value("java.lang.Class|no.such.module.Thing")


@pytest.mark.unit
class TestDecodePayload:
    def test_known_tag(self) -> None:
        assert decode_payload(TypeTag.FILE, "a/b").value == Path("a/b")  # type: ignore[union-attr]

    def test_blank_tag(self) -> None:
        assert decode_payload(" ", "anything") is None

    def test_unknown_tag(self) -> None:
        with pytest.raises(UnknownTypeError):
            decode_payload("java.util.Date", "0")


@pytest.mark.unit
class TestRoundTrip:
    @pytest.mark.parametrize(
        ("tag", "value"),
        [
            (TypeTag.STRING, "plain text, with comma | and pipe"),
            (TypeTag.STRING, ""),
            (TypeTag.CLASS, Fraction),
            (TypeTag.FILE, Path("target") / "test-classes"),
            (TypeTag.FILE_ARRAY, [Path("a.jar"), Path("lib") / "b.jar"]),
            (TypeTag.STRING_LIST, ["alpha", "beta", "gamma"]),
            (TypeTag.BOOLEAN, True),
            (TypeTag.BOOLEAN, False),
            (TypeTag.INTEGER, 0),
            (TypeTag.INTEGER, -(2**31)),
        ],
    )
    def test_decode_reproduces_value(self, tag: TypeTag, value: Any) -> None:
        original = typed_value(tag, value)
        assert decode_value(encode_typed(original)) == original

    def test_sub_properties_equal_as_mapping(self) -> None:
        mapping = {
            "z.last": "1",
            "a first": "x=y:z",
            "unicode": "naïve ☃",
            "multi": "one\ntwo",
        }
        decoded = decode_value(encode_value(TypeTag.PROPERTIES, mapping))
        assert isinstance(decoded, SubPropertiesValue)
        assert decoded.value.items() == mapping.items()

    def test_decoded_value_is_a_copy(self) -> None:
        original = typed_value(TypeTag.STRING_LIST, ["a", "b"])
        decoded = decode_value(encode_typed(original))
        assert decoded == original
        assert decoded is not original
        assert decoded.value is not original.value  # type: ignore[union-attr]
