"""Aromaticity perception for rings found by the ring search.

A ring is aromatic when all of its bonds are already aromatic (flagged,
or bond order inside the aromatic window), or when its Kekulé structure
passes a Hückel 4n+2 pi-electron count.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Hashable, List, Optional, Sequence

from .geometry import GeometryCalculator
from .molgraph import bond_key, bond_order
from .parameters import AromaticityThresholds, RingSearchOptions
from .ring import Ring
from .ring_finder import find_ring

if TYPE_CHECKING:
    import networkx as nx

logger = logging.getLogger(__name__)

_DEFAULT_THRESHOLDS = AromaticityThresholds()


def _is_aromatic_bond(G: nx.Graph, bond, thresholds: AromaticityThresholds) -> bool:
    data = G.edges[bond]
    if data.get("aromatic"):
        return True
    return thresholds.aromatic_bond_min < data.get("bond_order", 1.0) < thresholds.aromatic_bond_max


def _pi_electrons(G: nx.Graph, atom: Hashable, thresholds: AromaticityThresholds) -> Optional[int]:
    """Pi electrons the atom donates to a ring, or None if it breaks conjugation."""
    data = G.nodes[atom]
    if G.degree(atom) + data.get("hydrogens", 0) > 3:
        return None  # sp3

    doubles = 0
    for nbr in G.neighbors(atom):
        order = bond_order(G, bond_key(atom, nbr))
        if order >= 2.5:
            return None
        if order >= 1.75:
            doubles += 1
    if doubles > 1:
        return None
    if doubles == 1:
        return 1

    charge = data.get("formal_charge", 0)
    if charge == 1:
        return 0  # empty p orbital
    if charge == -1 or data.get("symbol") in thresholds.lone_pair_elements:
        return 2
    return None


def ring_is_aromatic(
    G: nx.Graph, ring: Ring, thresholds: Optional[AromaticityThresholds] = None
) -> bool:
    """Decide whether ``ring`` is aromatic in ``G``.

    Parameters
    ----------
    G : nx.Graph
        Molecular graph with ``bond_order`` edge attributes and optional
        ``hydrogens``/``formal_charge``/``position`` node attributes.
    ring : Ring
        Ring to test.
    thresholds : AromaticityThresholds, optional
        Bond-order window, planarity settings and lone-pair donors.
    """
    thresholds = thresholds or _DEFAULT_THRESHOLDS

    if thresholds.require_planar and GeometryCalculator.has_positions(ring.atoms, G):
        if not GeometryCalculator.check_planarity(ring.atoms, G, thresholds.planarity_tolerance):
            return False

    if all(_is_aromatic_bond(G, bond, thresholds) for bond in ring.bonds):
        return True

    n_pi = 0
    for atom in ring.atoms:
        pi = _pi_electrons(G, atom, thresholds)
        if pi is None:
            return False
        n_pi += pi
    return n_pi % 4 == 2


def perceive_aromaticity(
    G: nx.Graph, rings: Sequence[Ring], thresholds: Optional[AromaticityThresholds] = None
) -> Sequence[Ring]:
    """Set the aromatic flag on each ring. Returns the same rings."""
    for ring in rings:
        ring.aromatic = ring_is_aromatic(G, ring, thresholds)
    return rings


def aromatize_graph(
    G: nx.Graph,
    options: Optional[RingSearchOptions] = None,
    thresholds: Optional[AromaticityThresholds] = None,
) -> List[Ring]:
    """Perceive aromatic rings over the whole graph and mark atoms and bonds.

    Searches all rings through every atom, keeps one ring per atom set,
    flags the aromatic ones and sets ``aromatic=True`` on their atoms and
    bonds (all other atoms and bonds are reset to False). The aromatic
    ring atom tuples are stored in ``G.graph["aromatic_rings"]``.

    Returns
    -------
    list[Ring]
        Every distinct ring found, aromatic or not.
    """
    options = options or RingSearchOptions(all=True)
    if not options.all:
        options = dataclasses.replace(options, all=True)

    for atom in G.nodes:
        G.nodes[atom]["aromatic"] = False
    for i, j in G.edges:
        G.edges[i, j]["aromatic"] = False

    rings: List[Ring] = []
    seen = set()
    for atom in G.nodes:
        for ring in find_ring(G, atom, options):
            if ring.atom_set in seen:
                continue
            seen.add(ring.atom_set)
            rings.append(ring)

    perceive_aromaticity(G, rings, thresholds)

    aromatic_rings = []
    for ring in rings:
        if not ring.aromatic:
            continue
        for atom in ring.atoms:
            G.nodes[atom]["aromatic"] = True
        for bond in ring.bonds:
            G.edges[bond]["aromatic"] = True
        aromatic_rings.append(ring.atoms)
    G.graph["aromatic_rings"] = aromatic_rings

    logger.debug("Aromaticity: %d ring(s), %d aromatic", len(rings), len(aromatic_rings))
    return rings
