"""Molecular graph construction and (de)serialisation.

Every builder produces an ``nx.Graph`` with node attributes ``symbol``,
``formal_charge``, ``hydrogens`` and edge attributes ``bond_order``,
``aromatic``, the attributes the ring search and aromaticity
perception read.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple, Union

import networkx as nx

logger = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    """Raised when graph input cannot be turned into a molecular graph."""


def graph_from_bonds(
    symbols: Sequence[str],
    bonds: Sequence[Union[Tuple[int, int], Tuple[int, int, float]]],
) -> nx.Graph:
    """Build a graph from element symbols and ``(i, j[, order])`` bonds.

    Atoms are numbered by their position in ``symbols``.
    """
    G = nx.Graph()
    for idx, sym in enumerate(symbols):
        G.add_node(idx, symbol=sym, formal_charge=0, hydrogens=0)

    n = len(symbols)
    for bond in bonds:
        if len(bond) not in (2, 3):
            raise GraphFormatError(f"Bond {bond!r}: expected (i, j) or (i, j, order)")
        i, j = int(bond[0]), int(bond[1])
        order = float(bond[2]) if len(bond) == 3 else 1.0
        if not (0 <= i < n and 0 <= j < n):
            raise GraphFormatError(f"Bond {bond!r}: atom index out of range (0..{n - 1})")
        if i == j:
            raise GraphFormatError(f"Bond {bond!r}: atom bonded to itself")
        G.add_edge(i, j, bond_order=order, aromatic=False)

    logger.debug("Built graph: %d atoms, %d bonds", G.number_of_nodes(), G.number_of_edges())
    return G


def graph_from_smiles(smiles: str, kekulize: bool = True) -> nx.Graph:
    """Build a heavy-atom graph from SMILES via RDKit.

    Parameters
    ----------
    smiles : str
        SMILES string.
    kekulize : bool
        Store Kekulé bond orders (1/2/3). If False, aromatic bonds keep
        order 1.5.

    Returns
    -------
    nx.Graph
        Node attributes ``symbol``, ``atomic_number``, ``formal_charge``,
        ``hydrogens`` (implicit + explicit H count); edge attributes
        ``bond_order`` and ``aromatic`` (RDKit's aromaticity flag).

    Raises
    ------
    GraphFormatError
        If RDKit cannot parse or kekulize the SMILES.
    """
    from rdkit import Chem, RDLogger  # lazy import - only SMILES input needs RDKit

    RDLogger.DisableLog("rdApp.*")
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise GraphFormatError(f"Invalid SMILES: {smiles!r}")

    aromatic = {b.GetIdx(): b.GetIsAromatic() for b in mol.GetBonds()}
    if kekulize:
        mol = Chem.RWMol(mol)
        try:
            Chem.Kekulize(mol, clearAromaticFlags=True)
        except Exception as e:
            raise GraphFormatError(f"Cannot kekulize {smiles!r}: {e}") from e

    G = nx.Graph(smiles=smiles)
    for atom in mol.GetAtoms():
        G.add_node(
            atom.GetIdx(),
            symbol=atom.GetSymbol(),
            atomic_number=atom.GetAtomicNum(),
            formal_charge=atom.GetFormalCharge(),
            hydrogens=atom.GetTotalNumHs(),
        )
    for bond in mol.GetBonds():
        G.add_edge(
            bond.GetBeginAtomIdx(),
            bond.GetEndAtomIdx(),
            bond_order=bond.GetBondTypeAsDouble(),
            aromatic=aromatic[bond.GetIdx()],
        )

    logger.debug("Built graph from %s: %d atoms, %d bonds", smiles, G.number_of_nodes(), G.number_of_edges())
    return G


def graph_to_dict(G: nx.Graph) -> Dict[str, Any]:
    """JSON-serialisable representation: graph attrs, nodes, edges."""
    return {
        "graph": dict(G.graph),
        "nodes": [{"id": n, **data} for n, data in G.nodes(data=True)],
        "edges": [{"source": i, "target": j, **data} for i, j, data in G.edges(data=True)],
    }


def graph_from_dict(data: Dict[str, Any]) -> nx.Graph:
    """Inverse of :func:`graph_to_dict`.

    ``position`` lists are converted back to tuples.
    """
    if not isinstance(data, dict) or "nodes" not in data:
        raise GraphFormatError("Graph data must be an object with a 'nodes' list")

    G = nx.Graph(**data.get("graph", {}))
    try:
        for node in data["nodes"]:
            attrs = {k: v for k, v in node.items() if k != "id"}
            if isinstance(attrs.get("position"), list):
                attrs["position"] = tuple(attrs["position"])
            G.add_node(node["id"], **attrs)
        for edge in data.get("edges", []):
            attrs = {k: v for k, v in edge.items() if k not in ("source", "target")}
            i, j = edge["source"], edge["target"]
            if i not in G or j not in G:
                raise GraphFormatError(f"Edge {i}-{j} references an unknown atom")
            G.add_edge(i, j, **attrs)
    except (KeyError, TypeError) as e:
        raise GraphFormatError(f"Malformed graph data: {e}") from e
    return G


def load_graph(path: Union[str, Path]) -> nx.Graph:
    """Read a graph JSON file written from :func:`graph_to_dict` output."""
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"{path}: invalid JSON ({e})") from e
    return graph_from_dict(data)
