"""Thin adapter over lxml for building documents and classifying inputs."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Union

from lxml import etree
from lxml import html as lxml_html

Document = etree._ElementTree
Element = etree._Element


def read_html(source: Union[str, bytes, Path, IO], encoding: Optional[str] = None) -> Document:
    """Parse HTML markup, a file path or an open file into a document tree.

    Empty input raises ``etree.ParserError`` whatever the source kind.
    """
    parser = lxml_html.HTMLParser(encoding=encoding) if encoding else None
    if isinstance(source, Path) or hasattr(source, "read"):
        tree = lxml_html.parse(str(source) if isinstance(source, Path) else source, parser=parser)
        if tree.getroot() is None:
            raise etree.ParserError("Document is empty")
        return tree
    root = lxml_html.document_fromstring(source, parser=parser)
    return root.getroottree()


def is_document(x) -> bool:
    return isinstance(x, etree._ElementTree)


def is_element(x) -> bool:
    return isinstance(x, etree._Element)


def child_nodes(node) -> list:
    """Ordered children of a document or element.

    A document has one child, its root element.
    """
    if is_document(node):
        root = node.getroot()
        return [root] if root is not None else []
    return list(node)


__all__ = ["Document", "Element", "read_html", "is_document", "is_element", "child_nodes"]
