"""Shared molecular graph fixtures (heavy-atom skeletons)."""

import networkx as nx
import pytest

from ringfind.graph_builders import graph_from_bonds


def _carbon_ring(n: int) -> nx.Graph:
    return graph_from_bonds(["C"] * n, [(i, (i + 1) % n) for i in range(n)])


@pytest.fixture
def ring_graph():
    """Factory for a simple n-membered carbon ring (atoms 0..n-1)."""
    return _carbon_ring


@pytest.fixture
def cyclohexane():
    return _carbon_ring(6)


@pytest.fixture
def fused_5_6():
    """Hydrindane skeleton: 6-ring 0-1-2-3-4-5 fused to 5-ring 4-5-6-7-8 on bond 4-5."""
    bonds = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0), (5, 6), (6, 7), (7, 8), (8, 4)]
    return graph_from_bonds(["C"] * 9, bonds)


@pytest.fixture
def spiro_5_6():
    """Spiro[4.5]decane: 5-ring 0-1-2-3-4 and 6-ring 0-5-6-7-8-9 share atom 0."""
    bonds = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
             (0, 5), (5, 6), (6, 7), (7, 8), (8, 9), (9, 0)]
    return graph_from_bonds(["C"] * 10, bonds)


@pytest.fixture
def bicyclobutane():
    """Bicyclo[1.1.0]butane: 4-ring 0-1-2-3 with bridging bond 1-3."""
    return graph_from_bonds(["C"] * 4, [(0, 1), (1, 2), (2, 3), (3, 0), (1, 3)])


@pytest.fixture
def kekule_benzene():
    """Benzene with alternating single/double bonds and one H per carbon."""
    G = graph_from_bonds(["C"] * 6, [(i, (i + 1) % 6, 2.0 if i % 2 == 0 else 1.0) for i in range(6)])
    for n in G.nodes:
        G.nodes[n]["hydrogens"] = 1
    return G
