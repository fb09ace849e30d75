import pytest

from protobom.edge import Edge
from protobom.enums import EdgeType


@pytest.mark.parametrize(
    ("existing", "dest", "expected_len"),
    [
        ([], ["test"], 1),
        (["test"], ["test"], 1),
        (["test", "test2"], ["test"], 2),
        (["test", "test2"], ["test2", "test"], 2),
    ],
)
def test_add_destination_by_id(existing, dest, expected_len):
    edge = Edge(to=list(existing))
    edge.add_destination_by_id(*dest)
    assert len(edge.to) == expected_len


def test_add_destination_keeps_order_and_dedupes_arguments():
    edge = Edge(to=["a"])
    edge.add_destination_by_id("b", "b", "c", "a")
    assert edge.to == ["a", "b", "c"]


def test_points_to():
    edge = Edge(type=EdgeType.CONTAINS, from_="a", to=["b", "c"])
    assert edge.points_to("b")
    assert not edge.points_to("a")


def test_copy_is_independent():
    edge = Edge(type=EdgeType.DEPENDS_ON, from_="a", to=["b"])
    copied = edge.copy()
    edge.to.append("c")
    assert copied.to == ["b"]
    assert copied.type == EdgeType.DEPENDS_ON
    assert copied.from_ == "a"


def test_equal_ignores_destination_order():
    e1 = Edge(type=EdgeType.CONTAINS, from_="a", to=["c", "b"])
    e2 = Edge(type=EdgeType.CONTAINS, from_="a", to=["b", "c"])
    assert e1.equal(e2)
    assert e1.flat_string() == e2.flat_string()


def test_equal_detects_differences():
    base = Edge(type=EdgeType.CONTAINS, from_="a", to=["b"])
    assert not base.equal(Edge(type=EdgeType.DEPENDS_ON, from_="a", to=["b"]))
    assert not base.equal(Edge(type=EdgeType.CONTAINS, from_="x", to=["b"]))
    assert not base.equal(Edge(type=EdgeType.CONTAINS, from_="a", to=["b", "c"]))
    assert base.equal(None) is False


def test_flat_string_does_not_reorder_destinations():
    edge = Edge(from_="a", to=["z", "b"])
    edge.flat_string()
    assert edge.to == ["z", "b"]