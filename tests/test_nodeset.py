from nodeselect.document import read_html
from nodeselect.dispatch import html_nodes
from nodeselect.nodeset import AttributeMap, NodeSet


def test_slices_and_concatenation_stay_node_sets():
    items = html_nodes(read_html("<i>1</i><i>2</i><i>3</i>"), css="i")
    assert isinstance(items[1:], NodeSet)
    assert items[0].text == "1"
    joined = items[:1] + items[2:]
    assert isinstance(joined, NodeSet)
    assert [n.text for n in joined] == ["1", "3"]


def test_flatten_preserves_group_order():
    assert NodeSet.flatten([[1, 2], [], [3]]) == [1, 2, 3]


def test_nodes_are_shared_with_the_document():
    doc = read_html("<p id='x'>a</p>")
    (p,) = html_nodes(doc, css="p")
    assert p.getroottree().getroot() is doc.getroot()


def test_reprs():
    items = html_nodes(read_html("<i>1</i>"), css="i")
    assert repr(items) == "NodeSet([<i>])"
    assert repr(NodeSet([None])) == "NodeSet([None])"
    assert repr(AttributeMap(href="x")) == "AttributeMap({'href': 'x'})"
