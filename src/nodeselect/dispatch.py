"""Select nodes from an HTML document with CSS or XPath.

``html_nodes`` and ``html_node`` accept a whole document, a single element or
a collection of elements (a :class:`NodeSet`, list or tuple), and a selector
given as exactly one of ``css`` or ``xpath``.

``html_node`` is like indexing: it always extracts exactly one result per
input. Given a collection of N nodes it returns a node set of N slots, some of
which may be ``None``. ``html_nodes`` searches and flattens, so its result for
a collection may be longer or shorter than the input.

CSS selectors are scoped by input shape: against a document they match
anywhere (``//``), against an element or a collection they only match inside
each element (``descendant::``), so chaining narrows the search::

    doc = read_html(markup)
    rows = html_nodes(doc, css="table tr")
    html_node(rows, css="td")        # first cell of every row

XPath selectors are used exactly as written. An expression starting with
``//`` always searches from the document root, wherever the context is; use
``.//`` to stay below the current element.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Optional

from lxml import etree

from .errors import UnsupportedInputError
from .extract import html_extract_1, html_extract_n
from .nodeset import NodeSet
from .selector import DOCUMENT_PREFIX, ELEMENT_PREFIX, make_selector


def _members(x):
    """Yield collection members, rejecting anything that is not a node slot."""
    for node in x:
        if node is not None and not isinstance(node, (etree._Element, etree._ElementTree)):
            raise UnsupportedInputError(node)
        yield node


@singledispatch
def html_nodes(x, css: Optional[str] = None, xpath: Optional[str] = None, *, flavor: str = "html") -> NodeSet:
    raise UnsupportedInputError(x)


@html_nodes.register(etree._ElementTree)
def _html_nodes_document(x, css=None, xpath=None, *, flavor="html"):
    i = make_selector(css, xpath)
    return html_extract_n(x, i, prefix=DOCUMENT_PREFIX, flavor=flavor)


@html_nodes.register(etree._Element)
def _html_nodes_element(x, css=None, xpath=None, *, flavor="html"):
    i = make_selector(css, xpath)
    return html_extract_n(x, i, prefix=ELEMENT_PREFIX, flavor=flavor)


@html_nodes.register(list)
@html_nodes.register(tuple)
def _html_nodes_collection(x, css=None, xpath=None, *, flavor="html"):
    i = make_selector(css, xpath)
    nodes = [html_extract_n(node, i, prefix=ELEMENT_PREFIX, flavor=flavor) for node in _members(x)]
    return NodeSet.flatten(nodes)


@singledispatch
def html_node(x, css: Optional[str] = None, xpath: Optional[str] = None, *, flavor: str = "html"):
    raise UnsupportedInputError(x)


@html_node.register(etree._ElementTree)
def _html_node_document(x, css=None, xpath=None, *, flavor="html"):
    i = make_selector(css, xpath)
    return html_extract_1(x, i, prefix=DOCUMENT_PREFIX, flavor=flavor)


@html_node.register(etree._Element)
def _html_node_element(x, css=None, xpath=None, *, flavor="html"):
    i = make_selector(css, xpath)
    return html_extract_1(x, i, prefix=ELEMENT_PREFIX, flavor=flavor)


@html_node.register(list)
@html_node.register(tuple)
def _html_node_collection(x, css=None, xpath=None, *, flavor="html"):
    i = make_selector(css, xpath)
    return NodeSet(html_extract_1(node, i, prefix=ELEMENT_PREFIX, flavor=flavor) for node in _members(x))


select_all = html_nodes
select_one = html_node

__all__ = ["html_nodes", "html_node", "select_all", "select_one"]
