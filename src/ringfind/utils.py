import logging
from typing import Any, Dict, List, Sequence, Tuple

import networkx as nx

from .molgraph import atom_label
from .ring import Ring, ring_sizes

_LOG_FORMAT = "%(message)s"


def configure_debug_logging() -> None:
    """Send ``ringfind`` debug messages to stderr. Safe to call repeatedly."""
    pkg_logger = logging.getLogger("ringfind")
    pkg_logger.setLevel(logging.DEBUG)
    if not any(getattr(h, "_ringfind_debug", False) for h in pkg_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._ringfind_debug = True
        pkg_logger.addHandler(handler)


def rings_to_dict(rings: Sequence[Ring]) -> List[Dict[str, Any]]:
    return [ring.to_dict() for ring in rings]


# -----------------------------
# Text report
# -----------------------------
def ring_report(G: nx.Graph, rings: Sequence[Ring]) -> str:
    """
    Tabular listing of rings: index, size, aromatic flag, then atoms as
    Symbol+index in ring order.
    """
    lines = [f"# Rings: {len(rings)} found"]
    if not rings:
        return "\n".join(lines)
    lines.append("# sizes: " + ", ".join(str(s) for s in ring_sizes(rings)))
    lines.append("# [idx] size arom | atoms")
    for idx, ring in enumerate(rings):
        arom = "*" if ring.is_aromatic() else "-"
        atoms = " ".join(atom_label(G, a) for a in ring.atoms)
        lines.append(f"[{idx:>3}] {ring.size:>4}  {arom:>3} | {atoms}")
    return "\n".join(lines)


def _parse_indices(text: str) -> List[int]:
    """Parse '1,2,3' into [1, 2, 3]."""
    try:
        return [int(tok) for tok in text.split(",") if tok.strip()]
    except ValueError:
        raise ValueError(f"Expected comma-separated integers, got {text!r}") from None


def _parse_pair(text: str) -> Tuple[int, int]:
    """Parse 'i,j' into (i, j)."""
    idx = _parse_indices(text)
    if len(idx) != 2:
        raise ValueError(f"Expected a pair 'i,j', got {text!r}")
    return idx[0], idx[1]
