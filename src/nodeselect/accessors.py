"""Helpers for reading text, names and attributes off selected nodes.

Each helper takes a single node (document or element) or a collection. For a
collection the result is a list with one entry per slot; ``None`` slots stay
``None``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .document import child_nodes, is_document, is_element
from .errors import UnsupportedInputError
from .nodeset import NodeSet


def _root(x):
    return x.getroot() if is_document(x) else x


def _map(x, fn: Callable[[Any], Any]):
    if isinstance(x, (list, tuple)):
        return [None if node is None else fn(_root(node)) for node in x]
    if is_document(x) or is_element(x):
        return fn(_root(x))
    raise UnsupportedInputError(x)


def _text(node, strip: bool) -> str:
    if isinstance(node, str):
        text = str(node)
    else:
        text = "".join(node.itertext())
    return text.strip() if strip else text


def html_text(x, strip: bool = True):
    return _map(x, lambda node: _text(node, strip))


def html_name(x):
    def name(node) -> Optional[str]:
        tag = getattr(node, "tag", None)
        return tag if isinstance(tag, str) else None

    return _map(x, name)


def html_attr(x, name: str, default: Optional[str] = None):
    return _map(x, lambda node: node.get(name, default))


def html_attrs(x) -> Any:
    def attrs(node) -> Dict[str, str]:
        return dict(node.attrib)

    return _map(x, attrs)


def html_children(x) -> NodeSet:
    """Element children of every input node, flattened in order."""
    if isinstance(x, (list, tuple)):
        groups: List[list] = [child_nodes(node) for node in x if node is not None]
        return NodeSet.flatten(groups)
    if is_document(x) or is_element(x):
        return NodeSet(child_nodes(x))
    raise UnsupportedInputError(x)


__all__ = ["html_text", "html_name", "html_attr", "html_attrs", "html_children"]
