"""Tests for class name resolution."""

from __future__ import annotations

import argparse
from collections import OrderedDict
from fractions import Fraction
from pathlib import Path

import pytest

from handoff.foundation.properties.exceptions import ClassResolutionError
from handoff.foundation.properties.resolution import (
    ClassResolver,
    ImportlibClassResolver,
    class_name,
)


@pytest.mark.unit
class TestClassName:
    def test_module_and_qualname(self) -> None:
        assert class_name(Fraction) == "fractions.Fraction"

    def test_builtin(self) -> None:
        assert class_name(int) == "builtins.int"


@pytest.mark.unit
class TestImportlibClassResolver:
    def test_resolves_dotted_name(self) -> None:
        assert ImportlibClassResolver().resolve("collections.OrderedDict") is OrderedDict

    def test_resolves_colon_name(self) -> None:
        assert ImportlibClassResolver().resolve("fractions:Fraction") is Fraction

    def test_resolves_builtin(self) -> None:
        assert ImportlibClassResolver().resolve("builtins.int") is int

    def test_resolves_nested_class(self) -> None:
        nested = argparse._SubParsersAction._ChoicesPseudoAction
        assert ImportlibClassResolver().resolve(class_name(nested)) is nested

    def test_round_trips_class_name(self) -> None:
        resolver = ImportlibClassResolver()
        assert resolver.resolve(class_name(Fraction)) is Fraction

    def test_missing_module(self) -> None:
        with pytest.raises(ClassResolutionError, match="no importable module"):
            ImportlibClassResolver().resolve("no_such_pkg.Thing")

    def test_missing_attribute(self) -> None:
        with pytest.raises(ClassResolutionError) as exc_info:
            ImportlibClassResolver().resolve("fractions.NoSuchClass")
        assert exc_info.value.class_name == "fractions.NoSuchClass"
        assert isinstance(exc_info.value.__cause__, AttributeError)

    def test_not_a_class(self) -> None:
        with pytest.raises(ClassResolutionError, match="not a class"):
            ImportlibClassResolver().resolve("os.path.join")

    @pytest.mark.parametrize("name", ["", "Fraction", "fractions.", ".Fraction", ":x"])
    def test_malformed_names(self, name: str) -> None:
        with pytest.raises(ClassResolutionError):
            ImportlibClassResolver().resolve(name)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ImportlibClassResolver(), ClassResolver)

    def test_missing_parent_package(self) -> None:
        with pytest.raises(ClassResolutionError, match="no importable module"):
            ImportlibClassResolver().resolve("no_such_pkg.sub.mod.Thing")

    def test_broken_module_is_not_reported_as_missing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "handoff_broken_dep.py").write_text(
            "import handoff_dependency_that_is_not_installed\n\nclass Thing:\n    pass\n"
        )
        monkeypatch.syspath_prepend(str(tmp_path))
        with pytest.raises(ClassResolutionError, match="import of 'handoff_broken_dep' failed") as exc_info:
            ImportlibClassResolver().resolve("handoff_broken_dep.Thing")
        cause = exc_info.value.__cause__
        assert isinstance(cause, ModuleNotFoundError)
        assert cause.name == "handoff_dependency_that_is_not_installed"

    def test_module_raising_import_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "handoff_bad_import.py").write_text(
            "from fractions import NoSuchName\n\nclass Thing:\n    pass\n"
        )
        monkeypatch.syspath_prepend(str(tmp_path))
        with pytest.raises(ClassResolutionError) as exc_info:
            ImportlibClassResolver().resolve("handoff_bad_import:Thing")
        assert isinstance(exc_info.value.__cause__, ImportError)
        assert "no importable module" not in str(exc_info.value)
