"""Class name resolution.

A class reference travels as its fully-qualified name. The receiving side
turns it back into a class through a :class:`ClassResolver`; the default
resolver imports the module part with :mod:`importlib` and walks the
remaining attributes.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Protocol, runtime_checkable

from handoff.foundation.properties.exceptions import ClassResolutionError

logger = logging.getLogger(__name__)


@runtime_checkable
class ClassResolver(Protocol):
    """Port for turning a qualified class name into a class.

    Example:
        >>> class FixedResolver:
        ...     def resolve(self, name: str) -> type:
        ...         return dict
        >>> isinstance(FixedResolver(), ClassResolver)
        True
    """

    def resolve(self, name: str) -> type[Any]:
        """Resolve ``name`` to a class.

        Raises:
            ClassResolutionError: If the name does not denote a loadable class.
        """
        ...


def class_name(cls: type[Any]) -> str:
    """Return the qualified name used to carry ``cls`` on the wire.

    Example:
        >>> from fractions import Fraction
        >>> class_name(Fraction)
        'fractions.Fraction'
    """
    return f"{cls.__module__}.{cls.__qualname__}"


def _names_prefix(missing: str | None, module_name: str) -> bool:
    # True when the missing module is module_name itself or one of its parents.
    if missing is None:
        return False
    return module_name == missing or module_name.startswith(f"{missing}.")


class ImportlibClassResolver:
    """Resolves ``package.module.Name`` (or ``package.module:Name``) names.

    Nested classes (``module.Outer.Inner``) are supported: the longest
    importable module prefix is imported and the rest of the name is looked
    up attribute by attribute.
    """

    def resolve(self, name: str) -> type[Any]:
        """Resolve ``name`` by importing its module.

        Args:
            name: Qualified class name.

        Returns:
            The class object.

        Raises:
            ClassResolutionError: If no module prefix exists, a module fails
                while importing, an attribute is missing, or the target is
                not a class.
        """
        if ":" in name:
            module_name, _, attr_path = name.partition(":")
            parts = [module_name, *attr_path.split(".")]
            split_points = [1]
        else:
            parts = name.split(".")
            split_points = list(range(len(parts) - 1, 0, -1))

        if not all(parts):
            raise ClassResolutionError(name, "malformed class name")

        for split in split_points:
            module_name = ".".join(parts[:split])
            try:
                target: Any = importlib.import_module(module_name)
            except ImportError as exc:
                if isinstance(exc, ModuleNotFoundError) and _names_prefix(exc.name, module_name):
                    continue
                logger.debug("Import of %s failed while resolving %s", module_name, name)
                raise ClassResolutionError(
                    name, f"import of '{module_name}' failed: {exc}"
                ) from exc
            for attr in parts[split:]:
                try:
                    target = getattr(target, attr)
                except AttributeError as exc:
                    logger.debug("Attribute %s missing while resolving %s", attr, name)
                    raise ClassResolutionError(
                        name, f"module '{module_name}' has no attribute path '{attr}'"
                    ) from exc
            if not isinstance(target, type):
                raise ClassResolutionError(name, "target is not a class")
            return target

        logger.debug("No importable module prefix for %s", name)
        raise ClassResolutionError(name, "no importable module")


DEFAULT_RESOLVER: ClassResolver = ImportlibClassResolver()
