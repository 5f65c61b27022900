"""Exception types raised by node selection."""

from __future__ import annotations

from typing import Any


class NodeselectError(Exception):
    """Base class for all errors raised by nodeselect."""


class ConfigurationError(NodeselectError, ValueError):
    """Selector arguments were malformed (neither or both of css/xpath)."""


class TranslationError(NodeselectError, ValueError):
    """The CSS-to-XPath translator rejected a selector."""

    def __init__(self, selector: str, reason: str) -> None:
        self.selector = selector
        self.reason = reason
        super().__init__(f"Could not translate CSS selector {selector!r}: {reason}")


class UnsupportedSelectorError(NodeselectError, TypeError):
    def __init__(self, selector: Any) -> None:
        self.selector = selector
        super().__init__(f"Don't know how to subset HTML with object of type {type(selector).__name__}")


class UnsupportedInputError(NodeselectError, TypeError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Don't know how to select nodes from object of type {type(value).__name__}")


__all__ = [
    "NodeselectError",
    "ConfigurationError",
    "TranslationError",
    "UnsupportedSelectorError",
    "UnsupportedInputError",
]
