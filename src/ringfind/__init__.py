from importlib.metadata import version
__version__ = version("ringfind")

# Import default parameters from config
from .config import DEFAULT_PARAMS
from .parameters import AromaticityThresholds, RingSearchOptions

# Main interfaces
from .ring import Ring, RingError
from .ring_finder import contains_ring, find_ring, find_ring_through_bond, find_smallest_ring

# Downstream perception
from .aromaticity import aromatize_graph, perceive_aromaticity, ring_is_aromatic

# Graph construction and utilities
from .graph_builders import (
    GraphFormatError,
    graph_from_bonds,
    graph_from_dict,
    graph_from_smiles,
    graph_to_dict,
    load_graph,
)
from .utils import configure_debug_logging, ring_report, rings_to_dict

__all__ = [
    # Main interfaces
    'find_ring',
    'find_ring_through_bond',
    'find_smallest_ring',
    'contains_ring',
    'Ring',
    'RingError',

    # Aromaticity
    'aromatize_graph',
    'perceive_aromaticity',
    'ring_is_aromatic',

    # Graph construction
    'graph_from_bonds',
    'graph_from_smiles',
    'graph_from_dict',
    'graph_to_dict',
    'load_graph',
    'GraphFormatError',

    # Utilities
    'configure_debug_logging',
    'ring_report',
    'rings_to_dict',

    # Configuration
    'DEFAULT_PARAMS',
    'RingSearchOptions',
    'AromaticityThresholds',
]
