"""Selector values and CSS-to-XPath translation.

A selector is either a :class:`CssSelector` or an :class:`XPathSelector`. CSS
selectors are translated with cssselect (through lxml's translators) using a
context prefix that decides the search scope:

* ``//`` when querying a whole document,
* ``descendant::`` when querying below a single element.

XPath selectors are used exactly as authored and ignore the prefix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

from cssselect import SelectorError
from lxml.cssselect import LxmlHTMLTranslator, LxmlTranslator

from .errors import ConfigurationError, TranslationError, UnsupportedSelectorError

logger = logging.getLogger(__name__)

DOCUMENT_PREFIX = "//"
ELEMENT_PREFIX = "descendant::"

TRANSLATORS = {
    "html": LxmlHTMLTranslator,
    "xml": LxmlTranslator,
}


@dataclass(frozen=True)
class CssSelector:
    value: str


@dataclass(frozen=True)
class XPathSelector:
    value: str


Selector = Union[CssSelector, XPathSelector]


def make_selector(css: Optional[str] = None, xpath: Optional[str] = None) -> Selector:
    """Build a selector from exactly one of ``css`` or ``xpath``."""
    if css is None and xpath is None:
        raise ConfigurationError("Please supply one of css or xpath")
    if css is not None and xpath is not None:
        raise ConfigurationError("Please supply css or xpath, not both")
    if css is not None:
        return CssSelector(css)
    return XPathSelector(xpath)


def is_selector(value: object) -> bool:
    return isinstance(value, (CssSelector, XPathSelector))


@lru_cache(maxsize=None)
def get_translator(flavor: str = "html"):
    try:
        return TRANSLATORS[flavor]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown translator flavor {flavor!r}; expected one of {sorted(TRANSLATORS)}"
        ) from None


def css_to_xpath(css: str, prefix: str = DOCUMENT_PREFIX, flavor: str = "html") -> str:
    translator = get_translator(flavor)
    try:
        xpath = translator.css_to_xpath(css, prefix=prefix)
    except SelectorError as exc:
        raise TranslationError(css, str(exc)) from exc
    logger.debug("Translated %r with prefix %r -> %s", css, prefix, xpath)
    return xpath


def translate_selector(selector: Selector, prefix: str, flavor: str = "html") -> str:
    """Resolve a selector to the XPath expression that will be evaluated."""
    if isinstance(selector, XPathSelector):
        return selector.value
    if isinstance(selector, CssSelector):
        return css_to_xpath(selector.value, prefix=prefix, flavor=flavor)
    raise UnsupportedSelectorError(selector)


__all__ = [
    "DOCUMENT_PREFIX",
    "ELEMENT_PREFIX",
    "CssSelector",
    "XPathSelector",
    "Selector",
    "make_selector",
    "is_selector",
    "get_translator",
    "css_to_xpath",
    "translate_selector",
]
