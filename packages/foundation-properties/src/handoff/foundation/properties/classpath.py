"""Classpath value object."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class Classpath:
    """Ordered list of classpath elements without duplicates.

    Attributes:
        elements: Path strings in search order.

    Example:
        >>> cp = Classpath(("lib/a.jar",)).add_element("lib/b.jar")
        >>> cp.get_class_path()
        ['lib/a.jar', 'lib/b.jar']
        >>> cp.add_element("lib/a.jar") == cp
        True
    """

    elements: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize elements to a duplicate-free tuple."""
        object.__setattr__(self, "elements", tuple(dict.fromkeys(self.elements)))

    def add_element(self, element: str | os.PathLike[str]) -> Classpath:
        """Return a classpath with ``element`` appended unless already present."""
        path = os.fspath(element)
        if path in self.elements:
            return self
        return Classpath((*self.elements, path))

    def get_class_path(self) -> list[str]:
        """Return the elements as a new list."""
        return list(self.elements)

    def as_path_string(self) -> str:
        """Join elements with the platform path separator."""
        return os.pathsep.join(self.elements)

    def __iter__(self) -> Iterator[str]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)
