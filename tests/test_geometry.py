"""Basic tests for ring geometry calculations."""

import networkx as nx
import numpy as np
import pytest

from ringfind.geometry import GeometryCalculator


def _hexagon(z_wobble: float = 0.0) -> nx.Graph:
    G = nx.Graph()
    for i in range(6):
        angle = 2 * np.pi * i / 6
        z = z_wobble if i % 2 else -z_wobble
        G.add_node(i, position=(np.cos(angle), np.sin(angle), z))
    return G


def test_distance_basic():
    assert GeometryCalculator.distance((0, 0, 0), (1, 0, 0)) == pytest.approx(1.0)


def test_angle_right():
    assert GeometryCalculator.angle((1, 0, 0), (0, 0, 0), (0, 1, 0)) == pytest.approx(90.0)


def test_angle_degenerate():
    assert GeometryCalculator.angle((0, 0, 0), (0, 0, 0), (1, 0, 0)) == 0.0


def test_ring_angle_sum_hexagon():
    """Hexagon sum = 720°."""
    assert GeometryCalculator.ring_angle_sum(list(range(6)), _hexagon()) == pytest.approx(720.0, abs=1)


def test_planarity_flat_ring():
    assert GeometryCalculator.check_planarity(list(range(6)), _hexagon())


def test_planarity_chair_ring():
    """Chair-like puckering of ±0.25 Å is not planar."""
    assert not GeometryCalculator.check_planarity(list(range(6)), _hexagon(0.25))


def test_centroid_and_normal():
    G = _hexagon()
    assert GeometryCalculator.ring_centroid(list(range(6)), G) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)
    normal = GeometryCalculator.ring_normal(list(range(6)), G)
    assert np.linalg.norm(normal) == pytest.approx(1.0)
    assert abs(normal[2]) == pytest.approx(1.0)


def test_has_positions():
    G = _hexagon()
    G.add_node(6)
    assert GeometryCalculator.has_positions([0, 1], G)
    assert not GeometryCalculator.has_positions([0, 6], G)
