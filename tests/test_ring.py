"""Tests for the Ring container."""

import networkx as nx
import numpy as np
import pytest

from ringfind.ring import Ring, RingError, ring_sizes


@pytest.fixture
def triangle():
    return Ring.from_sequences([0, 1, 2], [(0, 1), (2, 1), (2, 0)])


def test_bulk_construction(triangle):
    """Bonds are stored by canonical key, in the given order."""
    assert triangle.atoms == (0, 1, 2)
    assert triangle.bonds == ((0, 1), (1, 2), (0, 2))
    assert triangle.size == len(triangle) == 3
    assert not triangle.is_aromatic()


def test_membership(triangle):
    assert 1 in triangle
    assert 5 not in triangle
    assert list(triangle) == [0, 1, 2]
    assert triangle.atom_set == frozenset({0, 1, 2})
    assert triangle.has_bond((1, 0))


def test_unchecked_add_skips_validation():
    ring = Ring()
    ring.add_atoms_unchecked(0, 1, 1)
    assert ring.atoms == (0, 1, 1)


def test_add_atom_rejects_duplicate():
    ring = Ring()
    ring.add_atom(0)
    with pytest.raises(RingError):
        ring.add_atom(0)


def test_add_bond_validates_endpoints():
    ring = Ring()
    ring.add_atom(0)
    ring.add_atom(1)
    ring.add_bond((1, 0))
    assert ring.bonds == ((0, 1),)
    with pytest.raises(RingError):
        ring.add_bond((0, 1))
    with pytest.raises(RingError):
        ring.add_bond((1, 7))


def test_equality_is_order_sensitive(triangle):
    same = Ring.from_sequences([0, 1, 2], [(0, 1), (1, 2), (0, 2)])
    reversed_ring = Ring.from_sequences([0, 2, 1], [(0, 2), (1, 2), (0, 1)])
    assert triangle == same
    assert hash(triangle) == hash(same)
    assert triangle != reversed_ring


def test_aromatic_flag(triangle):
    triangle.aromatic = True
    assert triangle.is_aromatic()
    assert "aromatic" in repr(triangle)
    assert triangle.to_dict() == {
        "size": 3,
        "atoms": [0, 1, 2],
        "bonds": [[0, 1], [1, 2], [0, 2]],
        "aromatic": True,
    }


def test_ring_sizes(triangle):
    square = Ring.from_sequences([0, 1, 2, 3], [(0, 1), (1, 2), (2, 3), (0, 3)])
    assert ring_sizes([square, triangle, square]) == [4, 3, 4]
    assert ring_sizes([square, triangle, square], unique=True) == [3, 4]


class TestRingGeometry:
    @pytest.fixture
    def hexagon(self):
        G = nx.cycle_graph(6)
        for i in range(6):
            angle = 2 * np.pi * i / 6
            G.nodes[i]["position"] = (np.cos(angle) + 1.0, np.sin(angle), 2.0)
        ring = Ring.from_sequences(range(6), [(i, (i + 1) % 6) for i in range(6)])
        return G, ring

    def test_centroid(self, hexagon):
        G, ring = hexagon
        assert ring.centroid(G) == pytest.approx([1.0, 0.0, 2.0])

    def test_normal_is_z_axis(self, hexagon):
        G, ring = hexagon
        assert abs(ring.normal(G)[2]) == pytest.approx(1.0)

    def test_planar(self, hexagon):
        G, ring = hexagon
        assert ring.is_planar(G)

    def test_missing_positions(self, triangle):
        with pytest.raises(RingError):
            triangle.centroid(nx.cycle_graph(3))
