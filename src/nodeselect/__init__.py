"""Select nodes from parsed HTML documents with CSS selectors or XPath."""

from .accessors import html_attr, html_attrs, html_children, html_name, html_text
from .dispatch import html_node, html_nodes, select_all, select_one
from .document import read_html
from .errors import (
    ConfigurationError,
    NodeselectError,
    TranslationError,
    UnsupportedInputError,
    UnsupportedSelectorError,
)
from .extract import extract_attrs, extract_children, html_extract_1, html_extract_n
from .nodeset import MISSING, AttributeMap, NodeSet
from .selector import CssSelector, XPathSelector, css_to_xpath, make_selector

__all__ = [
    "html_nodes",
    "html_node",
    "select_all",
    "select_one",
    "html_extract_1",
    "html_extract_n",
    "extract_attrs",
    "extract_children",
    "html_text",
    "html_name",
    "html_attr",
    "html_attrs",
    "html_children",
    "read_html",
    "make_selector",
    "css_to_xpath",
    "CssSelector",
    "XPathSelector",
    "NodeSet",
    "AttributeMap",
    "MISSING",
    "NodeselectError",
    "ConfigurationError",
    "TranslationError",
    "UnsupportedSelectorError",
    "UnsupportedInputError",
]

__version__ = "0.1.0"
