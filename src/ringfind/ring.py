"""Ring container: ordered atoms, parallel bonds, aromatic flag."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Hashable, Iterable, List, Sequence, Tuple

import networkx as nx
import numpy as np

from .geometry import GeometryCalculator
from .molgraph import Bond, bond_endpoints, bond_key


class RingError(ValueError):
    """Raised for invalid ring edits or missing ring geometry."""


class Ring:
    """A simple cycle of a molecular graph.

    ``bonds[k]`` joins ``atoms[k]`` and ``atoms[k + 1]``; the last bond
    closes the cycle back onto ``atoms[0]``. The aromatic flag is not
    computed here, see :mod:`ringfind.aromaticity`.
    """

    __slots__ = ("_atoms", "_bonds", "_atom_set", "aromatic")

    def __init__(self, aromatic: bool = False):
        self._atoms: List[Hashable] = []
        self._bonds: List[Bond] = []
        self._atom_set: set = set()
        self.aromatic = aromatic

    @classmethod
    def from_sequences(
        cls, atoms: Iterable[Hashable], bonds: Iterable[Bond], aromatic: bool = False
    ) -> "Ring":
        """Build a ring from known-valid atom and bond sequences."""
        ring = cls(aromatic=aromatic)
        ring.add_atoms_unchecked(*atoms)
        ring.add_bonds_unchecked(*bonds)
        return ring

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_atoms_unchecked(self, *atoms: Hashable) -> None:
        """Append atoms without any validation."""
        self._atoms.extend(atoms)
        self._atom_set.update(atoms)

    def add_bonds_unchecked(self, *bonds: Bond) -> None:
        """Append bonds without any validation."""
        self._bonds.extend(bond_key(*b) for b in bonds)

    def add_atom(self, atom: Hashable) -> None:
        if atom in self._atom_set:
            raise RingError(f"Atom {atom!r} is already in the ring")
        self.add_atoms_unchecked(atom)

    def add_bond(self, bond: Bond) -> None:
        """Append a bond whose endpoints are both ring atoms."""
        key = bond_key(*bond)
        a, b = bond_endpoints(key)
        if a not in self._atom_set or b not in self._atom_set:
            raise RingError(f"Bond {key!r} has an endpoint outside the ring")
        if key in self._bonds:
            raise RingError(f"Bond {key!r} is already in the ring")
        self._bonds.append(key)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def atoms(self) -> Tuple[Hashable, ...]:
        return tuple(self._atoms)

    @property
    def bonds(self) -> Tuple[Bond, ...]:
        return tuple(self._bonds)

    @property
    def atom_set(self) -> FrozenSet[Hashable]:
        return frozenset(self._atom_set)

    @property
    def size(self) -> int:
        return len(self._atoms)

    def is_aromatic(self) -> bool:
        return bool(self.aromatic)

    def has_bond(self, bond: Bond) -> bool:
        return bond_key(*bond) in self._bonds

    def __len__(self) -> int:
        return len(self._atoms)

    def __contains__(self, atom: Hashable) -> bool:
        return atom in self._atom_set

    def __iter__(self):
        return iter(self._atoms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ring):
            return NotImplemented
        return self._atoms == other._atoms and self._bonds == other._bonds

    def __hash__(self) -> int:
        return hash((tuple(self._atoms), tuple(self._bonds)))

    def __repr__(self) -> str:
        flag = ", aromatic" if self.aromatic else ""
        return f"Ring({list(self._atoms)!r}{flag})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "atoms": list(self._atoms),
            "bonds": [list(b) for b in self._bonds],
            "aromatic": self.is_aromatic(),
        }

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def _require_positions(self, G: nx.Graph) -> None:
        if not GeometryCalculator.has_positions(self._atoms, G):
            raise RingError("Ring geometry needs a 'position' on every ring atom")

    def centroid(self, G: nx.Graph) -> np.ndarray:
        """Geometric centre of the ring atoms."""
        self._require_positions(G)
        return GeometryCalculator.ring_centroid(self._atoms, G)

    def normal(self, G: nx.Graph) -> np.ndarray:
        """Unit vector normal to the best-fit ring plane."""
        self._require_positions(G)
        return GeometryCalculator.ring_normal(self._atoms, G)

    def is_planar(self, G: nx.Graph, tolerance: float = 0.15) -> bool:
        self._require_positions(G)
        return GeometryCalculator.check_planarity(self._atoms, G, tolerance)


def ring_sizes(rings: Sequence[Ring], unique: bool = False) -> List[int]:
    """Sizes of the given rings, in order (sorted and de-duplicated if unique)."""
    sizes = [ring.size for ring in rings]
    return sorted(set(sizes)) if unique else sizes
