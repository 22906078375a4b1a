import pytest

from urbangen.polygon import Polygon
from urbangen.primitives import Point
from urbangen.subregion import Edge, SubRegion


def _square():
    return Polygon(Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10))


def _rectangle():
    return Polygon(Point(0, 0), Point(10, 0), Point(10, 4), Point(0, 4))


def test_round_trip_to_polygon():
    region = SubRegion(_square())
    assert list(region.to_polygon()) == list(_square())


def test_cycle_links_are_consistent():
    edges = list(SubRegion(_square()).edges())
    assert len(edges) == 4
    for edge in edges:
        assert edge.next.previous is edge
        assert edge.previous.next is edge


def test_too_few_vertices():
    with pytest.raises(ValueError):
        SubRegion(Polygon(Point(0, 0), Point(1, 0)))


def test_no_road_access_initially():
    region = SubRegion(_rectangle())
    edges = list(region.edges())
    assert not region.has_road_access()
    assert region.longest_edge_with_road_access() is None
    assert region.longest_edge_without_road_access() is edges[0]


def test_longest_edge_with_road_access():
    region = SubRegion(_rectangle())
    edges = list(region.edges())
    edges[1].has_road_access = True
    edges[2].has_road_access = True
    assert region.has_road_access()
    assert region.longest_edge_with_road_access() is edges[2]
    assert region.longest_edge_without_road_access() is edges[0]


def test_longest_edge_of_empty_region():
    with pytest.raises(ValueError):
        SubRegion().longest_edge_with_road_access()


def test_insert_into_cycle():
    region = SubRegion(_square())
    first = next(region.edges())
    new = region.insert(first, Point(5, 0))
    assert first.next is new
    assert new.previous is first
    assert new.has_road_access is False
    assert new.s == 0
    assert list(region.to_polygon())[1] == Point(5, 0)
    assert len(region.to_polygon()) == 5


def test_insert_into_empty_region():
    region = SubRegion()
    edge = region.insert(None, Point(1, 2))
    assert edge.next is edge
    assert edge.previous is edge
    assert list(region.edges()) == [edge]


def test_insert_requires_edge():
    region = SubRegion(_square())
    with pytest.raises(ValueError):
        region.insert(None, Point(5, 0))


def test_from_edge_is_independent_copy():
    region = SubRegion(_square())
    original = list(region.edges())
    original[2].has_road_access = True
    copy = SubRegion.from_edge(original[2])
    copied = list(copy.edges())
    assert copied[0].begining == original[2].begining
    assert copied[0].has_road_access is True
    assert all(a is not b for a, b in zip(copied, original))
    copied[0].has_road_access = False
    assert original[2].has_road_access is True


def test_bridge_splits_region_in_two():
    square = _square()
    region = SubRegion(square)
    edges = list(region.edges())
    bottom = region.insert(edges[0], Point(5, 0))
    top = region.insert(edges[2], Point(5, 10))
    bottom.has_road_access = True

    region.bridge(bottom, top)

    left = SubRegion.from_edge(bottom).to_polygon()
    right = SubRegion.from_edge(top).to_polygon()
    assert len(left) == 4
    assert len(right) == 4
    assert left.area() == pytest.approx(square.area() / 2)
    assert left.area() + right.area() == pytest.approx(square.area())
    assert bottom.has_road_access is False
    assert top.has_road_access is False
    assert top.next.has_road_access is True
    assert len(list(region.edges())) == 4


def test_edges_order_by_point():
    a = Edge(Point(1, 0))
    b = Edge(Point(2, 0))
    c = Edge(Point(1, 5))
    assert a < b
    assert sorted([b, c, a]) == [a, c, b]


def test_str():
    region = SubRegion(_square())
    text = str(region)
    assert text.startswith("SubRegion( \n")
    assert text.endswith(")\n")
    assert text.count("  Edge(\n") == 4
    assert "roadAccess = 0" in text
    assert "roadAccess = 1" not in text