"""Atom/bond view of a NetworkX molecular graph.

Atoms are graph nodes, bonds are identified by the sorted pair of their
endpoints so that ``(i, j)`` and ``(j, i)`` name the same bond.
"""

from typing import Hashable, Iterator, Optional, Tuple

import networkx as nx

Bond = Tuple[Hashable, Hashable]


def bond_key(i: Hashable, j: Hashable) -> Bond:
    """Canonical identity of the bond between atoms i and j."""
    try:
        return (i, j) if i <= j else (j, i)
    except TypeError:
        # Mixed label types: fall back to a stable textual order
        return (i, j) if repr(i) <= repr(j) else (j, i)


def bond_endpoints(bond: Bond) -> Tuple[Hashable, Hashable]:
    """Both atoms of a bond, in canonical order."""
    return bond_key(*bond)


def neighbors_excluding(
    G: nx.Graph, atom: Hashable, from_atom: Optional[Hashable] = None
) -> Iterator[Tuple[Bond, Hashable]]:
    """Yield ``(bond, neighbor)`` for every neighbor of atom except from_atom.

    Neighbors come in the graph's adjacency order, which keeps the ring
    search deterministic for a given graph. Self-loops are skipped.
    """
    for nbr in G.neighbors(atom):
        if nbr == atom or (from_atom is not None and nbr == from_atom):
            continue
        yield bond_key(atom, nbr), nbr


def bond_order(G: nx.Graph, bond: Bond) -> float:
    return G.edges[bond].get("bond_order", 1.0)


def atom_label(G: nx.Graph, atom: Hashable) -> str:
    """``Symbol+index`` label used in reports and log messages."""
    return f"{G.nodes[atom].get('symbol', '?')}{atom}"
