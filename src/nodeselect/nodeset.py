"""Result containers: node sets and attribute maps."""

from __future__ import annotations

from typing import Iterable

MISSING = None


def _describe(node) -> str:
    tag = getattr(node, "tag", None)
    if isinstance(tag, str):
        return f"<{tag}>"
    return repr(node)


class NodeSet(list):
    """Ordered collection of nodes in document (or match) order.

    Holds references into the parsed tree, never copies. Slots may be ``None``
    when produced by ``html_node`` over a collection. A node set can be passed
    straight back to ``html_nodes``/``html_node`` to chain selections.
    """

    def __getitem__(self, index):
        result = super().__getitem__(index)
        if isinstance(index, slice):
            return NodeSet(result)
        return result

    def __add__(self, other):
        return NodeSet(list(self) + list(other))

    def __repr__(self) -> str:
        return f"NodeSet([{', '.join(_describe(node) for node in self)}])"

    @classmethod
    def flatten(cls, groups: Iterable[Iterable]) -> "NodeSet":
        out = cls()
        for group in groups:
            out.extend(group)
        return out


class AttributeMap(dict):
    """Requested attribute name -> value, or ``MISSING`` when absent."""

    def __repr__(self) -> str:
        return f"AttributeMap({dict.__repr__(self)})"


__all__ = ["MISSING", "NodeSet", "AttributeMap"]
