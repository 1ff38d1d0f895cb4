"""Pure geometric calculations over ring atoms.

All methods are stateless and read the ``position`` node attribute.
"""

from typing import Hashable, Sequence, Tuple

import networkx as nx
import numpy as np


class GeometryCalculator:
    """Stateless utility for ring geometry.

    All methods are static - no mutable state, can be shared across components.
    """

    @staticmethod
    def positions(ring: Sequence[Hashable], graph: nx.Graph) -> np.ndarray:
        """(n, 3) array of ring atom positions. KeyError if any is missing."""
        return np.array([graph.nodes[i]["position"] for i in ring], dtype=float)

    @staticmethod
    def has_positions(ring: Sequence[Hashable], graph: nx.Graph) -> bool:
        return all(graph.nodes[i].get("position") is not None for i in ring)

    @staticmethod
    def distance(pos1: Tuple[float, float, float], pos2: Tuple[float, float, float]) -> float:
        """Euclidean distance between two 3D points."""
        return float(np.linalg.norm(np.array(pos1) - np.array(pos2)))

    @staticmethod
    def angle(
        pos1: Tuple[float, float, float],
        pos2: Tuple[float, float, float],
        pos3: Tuple[float, float, float],
    ) -> float:
        """Angle at pos2 formed by pos1-pos2-pos3 (in degrees)."""
        v1 = np.array(pos1) - np.array(pos2)
        v2 = np.array(pos3) - np.array(pos2)

        v1_norm = np.linalg.norm(v1)
        v2_norm = np.linalg.norm(v2)

        if v1_norm < 1e-10 or v2_norm < 1e-10:
            return 0.0

        cos_angle = np.clip(np.dot(v1 / v1_norm, v2 / v2_norm), -1.0, 1.0)
        return float(np.degrees(np.arccos(cos_angle)))

    @staticmethod
    def ring_angle_sum(ring: Sequence[Hashable], graph: nx.Graph) -> float:
        """Sum of internal angles in a ring."""
        if len(ring) < 3:
            return 0.0

        angle_sum = 0.0
        n = len(ring)

        for i in range(n):
            pos_prev = graph.nodes[ring[(i - 1) % n]]["position"]
            pos_curr = graph.nodes[ring[i]]["position"]
            pos_next = graph.nodes[ring[(i + 1) % n]]["position"]
            angle_sum += GeometryCalculator.angle(pos_prev, pos_curr, pos_next)

        return angle_sum

    @staticmethod
    def ring_centroid(ring: Sequence[Hashable], graph: nx.Graph) -> np.ndarray:
        """Mean position of the ring atoms."""
        return GeometryCalculator.positions(ring, graph).mean(axis=0)

    @staticmethod
    def ring_normal(ring: Sequence[Hashable], graph: nx.Graph) -> np.ndarray:
        """Unit normal of the best-fit plane through the ring atoms.

        Uses SVD: the plane normal is the smallest singular vector.
        """
        coords = GeometryCalculator.positions(ring, graph)
        centered = coords - coords.mean(axis=0)
        _, _, vh = np.linalg.svd(centered, full_matrices=False)
        normal = vh[-1]
        norm = np.linalg.norm(normal)
        return normal / norm if norm > 1e-12 else normal

    @staticmethod
    def check_planarity(ring: Sequence[Hashable], graph: nx.Graph, tolerance: float = 0.15) -> bool:
        """Check if ring atoms lie approximately in a plane.

        Parameters
        ----------
        ring : Sequence
            Node labels forming the ring
        graph : nx.Graph
            Graph containing node positions
        tolerance : float
            Maximum allowed deviation from plane (Angstroms)

        Returns
        -------
        bool
            True if all atoms within tolerance of best-fit plane
        """
        if len(ring) <= 3:
            return True  # 3-rings always planar

        coords = GeometryCalculator.positions(ring, graph)
        centered = coords - coords.mean(axis=0)
        normal = GeometryCalculator.ring_normal(ring, graph)

        distances = np.abs(centered @ normal)
        return bool(distances.max() < tolerance)
