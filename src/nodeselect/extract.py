"""Single- and multi-node extraction against one context node."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence, Union

from .document import child_nodes
from .errors import UnsupportedSelectorError
from .nodeset import MISSING, AttributeMap, NodeSet
from .selector import Selector, is_selector, translate_selector

logger = logging.getLogger(__name__)


def evaluate(node, xpath: str) -> List[Any]:
    """Evaluate ``xpath`` with ``node`` as the context, in document order."""
    result = node.xpath(xpath)
    if not isinstance(result, list):
        return [result]
    return result


def _is_position(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _all_match(values: Sequence[Any], check) -> bool:
    return bool(values) and all(check(v) for v in values)


def html_extract_1(node, selector: Selector, prefix: str, flavor: str = "html"):
    """Return the first match of ``selector`` below ``node``, or ``None``."""
    if not is_selector(selector):
        raise UnsupportedSelectorError(selector)
    if node is None:
        return None
    xpath = translate_selector(selector, prefix, flavor=flavor)
    out = evaluate(node, xpath)
    logger.debug("%s matched %d node(s)", xpath, len(out))
    if not out:
        return None
    return out[0]


def extract_children(node, positions: Iterable[int]) -> NodeSet:
    """Children of ``node`` at 1-based ``positions``; ``None`` where absent."""
    children = child_nodes(node) if node is not None else []
    out = NodeSet()
    for pos in positions:
        if 1 <= pos <= len(children):
            out.append(children[pos - 1])
        else:
            out.append(None)
    return out


def extract_attrs(node, names: Iterable[str]) -> AttributeMap:
    """Look up ``names`` on ``node``, keyed in request order.

    A name requested more than once appears once, at its first position.
    """
    attrib = getattr(node, "attrib", None) or {}
    return AttributeMap((name, attrib.get(name, MISSING)) for name in names)


def html_extract_n(
    node,
    target: Union[Selector, int, str, Sequence[int], Sequence[str]],
    prefix: str,
    flavor: str = "html",
) -> Union[NodeSet, AttributeMap]:
    """Extract every match of ``target`` from ``node``.

    ``target`` may be a selector (all matches as a :class:`NodeSet`), one or
    more 1-based child positions, or one or more attribute names. Attribute
    names are the only case that returns an :class:`AttributeMap` instead of
    a node set.
    """
    if is_selector(target):
        if node is None:
            return NodeSet()
        xpath = translate_selector(target, prefix, flavor=flavor)
        out = NodeSet(evaluate(node, xpath))
        logger.debug("%s matched %d node(s)", xpath, len(out))
        return out
    if _is_position(target):
        return extract_children(node, [target])
    if isinstance(target, str):
        return extract_attrs(node, [target])
    if isinstance(target, (list, tuple, range)):
        values = list(target)
        if _all_match(values, _is_position):
            return extract_children(node, values)
        if _all_match(values, lambda v: isinstance(v, str)):
            return extract_attrs(node, values)
    raise UnsupportedSelectorError(target)


__all__ = [
    "evaluate",
    "html_extract_1",
    "html_extract_n",
    "extract_children",
    "extract_attrs",
]
