"""Error hierarchy for the typed property protocol.

Every failure raised by the codecs and the property wrapper derives from
:class:`PropertiesError`, which carries a machine-readable error code and
structured context so callers can log or report failures consistently.

Example:
    >>> from handoff.foundation.properties.exceptions import UnknownTypeError
    >>> raise UnknownTypeError("mystery")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ClassResolutionError",
    "CodecCorruptionError",
    "InvalidArgumentError",
    "NullItemError",
    "PropertiesError",
    "UnknownTypeError",
]


class PropertiesError(Exception):
    """Base class for all typed property errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (keys, tags, positions).

    Example:
        >>> raise PropertiesError("Decode failed", context={"key": "provider"})
        PropertiesError: Decode failed (key=provider)
    """

    error_code: str = "PROPERTIES_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize the error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class UnknownTypeError(PropertiesError):
    """Raised when an encoded value carries a type tag outside the closed set.

    This is a protocol violation between producer and consumer and is never
    expected under correct use.

    Attributes:
        error_code: "UNKNOWN_TYPE" (class constant).
        tag: The unrecognized type tag.

    Example:
        >>> raise UnknownTypeError("mystery")
        UnknownTypeError: Unknown parameter type: mystery (tag=mystery)
    """

    error_code: str = "UNKNOWN_TYPE"

    def __init__(self, tag: str, **extra_context: Any) -> None:
        """Initialize unknown type error.

        Args:
            tag: The type tag that could not be matched.
            **extra_context: Additional debugging context (e.g., key).
        """
        self.tag = tag
        message = f"Unknown parameter type: {tag}"
        super().__init__(message, {"tag": tag, **extra_context})


class ClassResolutionError(PropertiesError):
    """Raised when a class reference cannot be resolved to a Python class.

    Attributes:
        error_code: "CLASS_RESOLUTION_FAILED" (class constant).
        class_name: The dotted name that failed to resolve.
        reason: Why resolution failed.
    """

    error_code: str = "CLASS_RESOLUTION_FAILED"

    def __init__(self, class_name: str, reason: str, **extra_context: Any) -> None:
        """Initialize class resolution error.

        Args:
            class_name: Fully-qualified class name that was requested.
            reason: Human-readable failure reason.
            **extra_context: Additional debugging context.
        """
        self.class_name = class_name
        self.reason = reason
        message = f"Cannot resolve class '{class_name}': {reason}"
        context = {"class_name": class_name, "reason": reason, **extra_context}
        super().__init__(message, context)


class CodecCorruptionError(PropertiesError):
    """Raised when an encoded payload cannot be parsed back into its type.

    Under a correct encode/decode pairing this never happens; seeing it means
    the producer wrote something this codec did not. The underlying parse
    failure is chained as ``__cause__``.

    Attributes:
        error_code: "CODEC_CORRUPTION" (class constant).
        tag: Type tag of the payload that failed to decode.
    """

    error_code: str = "CODEC_CORRUPTION"

    def __init__(self, tag: str, reason: str, **extra_context: Any) -> None:
        """Initialize codec corruption error.

        Args:
            tag: Type tag whose payload failed to decode.
            reason: Description of the underlying failure.
            **extra_context: Additional debugging context.
        """
        self.tag = tag
        message = f"Bug in property conversion for {tag}: {reason}"
        super().__init__(message, {"tag": tag, **extra_context})


class NullItemError(PropertiesError):
    """Raised when a ``None`` item is handed to the indexed sequence encoder.

    Attributes:
        error_code: "NULL_ITEM" (class constant).
        key: The numbered key the item would have been stored under.
        position: Logical position of the item in the input sequence.

    Example:
        >>> raise NullItemError("tc.", key="tc.1", position=1)
        NullItemError: tc.1 has null value (prefix=tc., key=tc.1, position=1)
    """

    error_code: str = "NULL_ITEM"

    def __init__(self, prefix: str, key: str, position: int) -> None:
        """Initialize null item error.

        Args:
            prefix: Key prefix of the sequence being written.
            key: Numbered key the item would have been stored under.
            position: Logical index of the item in the input sequence.
        """
        self.prefix = prefix
        self.key = key
        self.position = position
        message = f"{key} has null value"
        super().__init__(message, {"prefix": prefix, "key": key, "position": position})


class InvalidArgumentError(PropertiesError):
    """Raised when an operation receives an argument it cannot work with."""

    error_code: str = "INVALID_ARGUMENT"
