"""Breadth-first ring search through a given atom or bond.

Finds the rings that include a starting atom (or bond); it does not find
every ring of the molecule, nor the Smallest Set of Smallest Rings.

Algorithm:
1. Grow shortest-path trees outward from the origin atom in BFS order,
   recording for every newly reached atom its atom path and bond path.
2. Reaching an atom that already has a path (a collision) closes a
   candidate ring made of the two paths.
3. Candidates are kept only if the two paths left the origin through
   different first atoms, the size fits the bounds, the ring was not
   already found in the opposite direction (unless ``mirror``), it holds
   the required bond (bond origins) and it is not a superset of a
   smaller ring already accepted.

BFS order means the first collision along a given branch is the
smallest ring through that branch.
"""

import logging
from collections import deque
from typing import Deque, Dict, Hashable, Iterable, List, Optional, Sequence, Set

import networkx as nx

from .molgraph import Bond, bond_key, neighbors_excluding
from .parameters import RingSearchOptions
from .ring import Ring

logger = logging.getLogger(__name__)

# Slack on the max_size/2 depth bound so odd rings keep their longer half-path
DEPTH_TOLERANCE = 0.1


class _TraversalState:
    """Mutable bookkeeping for one search call. Never shared between calls."""

    __slots__ = ("paths", "bond_paths", "queue", "rings", "used_end_atoms")

    def __init__(self, origin: Hashable):
        self.paths: Dict[Hashable, List[Hashable]] = {origin: [origin]}
        self.bond_paths: Dict[Hashable, List[Bond]] = {origin: []}
        self.queue: Deque[Hashable] = deque([origin])
        self.rings: List[Ring] = []
        self.used_end_atoms: Set[Hashable] = set()


def contains_ring(atoms: Sequence[Hashable], rings: Iterable[Ring]) -> bool:
    """True if one of ``rings`` is a proper subset of ``atoms``.

    Only rings with fewer atoms than the candidate are considered.
    """
    seen = set(atoms)
    for ring in rings:
        if ring.size >= len(seen):
            continue
        if all(atom in seen for atom in ring.atoms):
            return True
    return False


def _options(options: Optional[RingSearchOptions], kwargs: dict) -> RingSearchOptions:
    if options is not None and kwargs:
        raise TypeError("Pass either a RingSearchOptions or keyword options, not both")
    if options is None:
        return RingSearchOptions.from_kwargs(**kwargs)
    return options


def find_ring(
    G: nx.Graph, atom: Hashable, options: Optional[RingSearchOptions] = None, **kwargs
) -> List[Ring]:
    """Find rings that contain ``atom``.

    Parameters
    ----------
    G : nx.Graph
        Molecular graph. Only read.
    atom : hashable
        Origin atom (graph node).
    options : RingSearchOptions, optional
        Search options. Alternatively pass them as keywords:
        ``all``, ``min``, ``max``, ``size``, ``exclude``, ``mirror``.

    Returns
    -------
    list[Ring]
        Rings in discovery order. Empty if none qualifies; at most one
        unless ``all`` is set.
    """
    return _search(G, atom, None, _options(options, kwargs))


def find_ring_through_bond(
    G: nx.Graph, bond: Bond, options: Optional[RingSearchOptions] = None, **kwargs
) -> List[Ring]:
    """Find rings that contain ``bond``.

    The search starts from the first atom of the canonical bond key and
    rejects every ring that does not use the bond itself.
    """
    required = bond_key(*bond)
    return _search(G, required[0], required, _options(options, kwargs))


def find_smallest_ring(G: nx.Graph, atom: Hashable) -> Optional[Ring]:
    """First (smallest along its branch) ring through ``atom``, or None."""
    rings = _search(G, atom, None, RingSearchOptions())
    return rings[0] if rings else None


def _search(
    G: nx.Graph,
    origin: Hashable,
    required_bond: Optional[Bond],
    options: RingSearchOptions,
) -> List[Ring]:
    min_size, max_size = options.bounds()
    exclude = options.exclude
    state = _TraversalState(origin)

    logger.debug(
        "Ring search from %s (min=%s, max=%s, all=%s, mirror=%s, required_bond=%s)",
        origin, min_size, max_size, options.all, options.mirror, required_bond,
    )

    while state.queue:
        a = state.queue.popleft()
        path_a = state.paths[a]
        from_atom = path_a[-2] if len(path_a) > 1 else None
        logger.debug("at %s from %s", a, from_atom)

        for bond, nei in neighbors_excluding(G, a, from_atom):
            if nei in exclude:
                continue

            if nei in state.paths:
                ring = _close_ring(state, a, nei, bond, min_size, max_size, required_bond, options.mirror)
                if ring is None:
                    continue
                if not options.all:
                    return [ring]
                state.rings.append(ring)
                state.used_end_atoms.add(ring.atoms[-1])
            elif max_size is None or len(path_a) < max_size / 2 + DEPTH_TOLERANCE:
                state.paths[nei] = path_a + [nei]
                state.bond_paths[nei] = state.bond_paths[a] + [bond]
                state.queue.append(nei)
            else:
                logger.debug("  path too long at %s -> %s", a, nei)

    logger.debug("Ring search from %s done: %d ring(s)", origin, len(state.rings))
    return state.rings


def _close_ring(
    state: _TraversalState,
    a: Hashable,
    nei: Hashable,
    bond: Bond,
    min_size: int,
    max_size: Optional[int],
    required_bond: Optional[Bond],
    mirror: bool,
) -> Optional[Ring]:
    """Validate the collision a -> nei; return the ring or None if rejected."""
    path_a = state.paths[a]
    path_nei = state.paths[nei]
    size = len(path_nei) + len(path_a) - 1

    # Both paths left the origin through the same atom: not a ring through it
    if len(path_a) > 1 and len(path_nei) > 1 and path_a[1] == path_nei[1]:
        return None
    if size < min_size or (max_size is not None and size > max_size):
        logger.debug("  collision %s -> %s: size %d out of bounds", a, nei, size)
        return None

    atoms = path_a + path_nei[::-1]
    atoms.pop()
    if not mirror and atoms[1] in state.used_end_atoms:
        logger.debug("  skipping redundant ring %s", atoms)
        return None

    bonds = state.bond_paths[a] + [bond] + state.bond_paths[nei][::-1]
    if required_bond is not None and required_bond not in bonds:
        logger.debug("  ring %s does not include required bond %s", atoms, required_bond)
        return None
    if contains_ring(atoms, state.rings):
        logger.debug("  ring %s contains another ring", atoms)
        return None

    logger.debug("  accepted ring %s (size %d)", atoms, size)
    return Ring.from_sequences(atoms, bonds)
