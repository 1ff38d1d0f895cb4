"""Type-safe configuration dataclasses for ring search and perception.

Inline docs explain what each parameter controls.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Hashable, Iterable, Optional, Tuple


@dataclass(frozen=True)
class RingSearchOptions:
    """Options for a single ring search.

    A falsy ``min_size`` means no lower bound and a falsy ``max_size``
    means no upper bound. ``size`` fills in whichever bound is not given.
    """

    all: bool = False
    """Return every qualifying ring instead of the first one found."""

    min_size: int = 0
    """Smallest accepted ring (atom count)."""

    max_size: Optional[int] = None
    """Largest accepted ring. Also bounds the search depth to ~max_size/2."""

    size: Optional[int] = None
    """Shorthand for min_size == max_size == size."""

    exclude: FrozenSet[Hashable] = field(default_factory=frozenset)
    """Atoms that may not appear in any returned ring."""

    mirror: bool = False
    """Report each ring once per traversal direction (forwards and backwards)."""

    def __post_init__(self):
        if not isinstance(self.exclude, frozenset):
            object.__setattr__(self, "exclude", frozenset(self.exclude or ()))

    def bounds(self) -> Tuple[int, Optional[int]]:
        """Effective ``(min_size, max_size)``; max_size None means unbounded."""
        min_size = self.min_size or self.size or 0
        max_size = self.max_size or self.size or None
        return min_size, max_size

    @classmethod
    def from_kwargs(
        cls,
        all: bool = False,
        min: int = 0,
        max: Optional[int] = None,
        size: Optional[int] = None,
        exclude: Iterable[Hashable] = (),
        mirror: bool = False,
    ) -> "RingSearchOptions":
        """Build options from the short names (``min``, ``max``) used by callers."""
        return cls(
            all=bool(all),
            min_size=min or 0,
            max_size=max,
            size=size,
            exclude=frozenset(exclude or ()),
            mirror=bool(mirror),
        )


@dataclass(frozen=True)
class AromaticityThresholds:
    """Criteria for flagging a ring as aromatic.

    Bond orders follow the graph convention: 1.5 for delocalised bonds,
    integers for Kekulé structures.
    """

    aromatic_bond_min: float = 1.4
    """Lower edge of the bond-order window that marks an aromatic bond."""

    aromatic_bond_max: float = 1.6
    """Upper edge of the aromatic bond-order window."""

    require_planar: bool = False
    """Also require ring planarity when all ring atoms carry positions."""

    planarity_tolerance: float = 0.15
    """Max deviation (Å) from the best-fit plane."""

    lone_pair_elements: FrozenSet[str] = frozenset({"N", "O", "S", "P", "Se"})
    """Heteroatoms that donate a lone pair (2 pi electrons) to the ring."""

    @classmethod
    def geometric(cls) -> "AromaticityThresholds":
        """Thresholds that also check planarity (for graphs with coordinates)."""
        return cls(require_planar=True)
