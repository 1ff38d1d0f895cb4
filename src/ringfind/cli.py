import argparse
import json
import sys

from . import __version__
from .aromaticity import perceive_aromaticity
from .config import DEFAULT_PARAMS
from .graph_builders import GraphFormatError, graph_from_smiles, load_graph
from .parameters import RingSearchOptions
from .ring_finder import find_ring, find_ring_through_bond
from .utils import _parse_indices, _parse_pair, configure_debug_logging, ring_report, rings_to_dict


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ringfind",
        description="Find rings through an atom or bond of a molecular graph.",
    )
    p.add_argument("graph", nargs="?", help="Input graph JSON file")
    p.add_argument("--smiles", type=str, help="Build the graph from a SMILES string instead (requires RDKit)")
    p.add_argument("--version", action="store_true", help="Print version information and exit")

    # Origin
    origin = p.add_mutually_exclusive_group()
    origin.add_argument("--atom", type=int, help="Origin atom index")
    origin.add_argument("--bond", type=str, help="Origin bond as two atom indices. Example: --bond 3,4")

    # Search options
    p.add_argument("--all", action="store_true", default=DEFAULT_PARAMS["all"],
                   help="Report every ring through the origin, not only the first")
    p.add_argument("--min", type=int, default=DEFAULT_PARAMS["min"],
                   help=f"Minimum ring size (default: {DEFAULT_PARAMS['min']})")
    p.add_argument("--max", type=int, default=DEFAULT_PARAMS["max"],
                   help="Maximum ring size (default: unbounded)")
    p.add_argument("--size", type=int, default=DEFAULT_PARAMS["size"],
                   help="Exact ring size (sets both --min and --max)")
    p.add_argument("--exclude", type=str,
                   help="Atoms that may not appear in any ring. Example: --exclude 0,5")
    p.add_argument("--mirror", action="store_true", default=DEFAULT_PARAMS["mirror"],
                   help="Report each ring once per traversal direction")

    # Output control
    p.add_argument("--aromaticity", action="store_true", default=DEFAULT_PARAMS["aromaticity"],
                   help="Flag aromatic rings")
    p.add_argument("--json", action="store_true", default=DEFAULT_PARAMS["json"],
                   help="Print rings as JSON")
    p.add_argument("-d", "--debug", action="store_true", default=DEFAULT_PARAMS["debug"],
                   help="Enable debug output (traversal details on stderr)")
    return p


def main(argv=None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.version:
        print(f"ringfind v{__version__}")
        return 0

    if not args.graph and not args.smiles:
        p.error("an input graph file or --smiles is required")
    if args.graph and args.smiles:
        p.error("give either a graph file or --smiles, not both")
    if args.atom is None and args.bond is None:
        p.error("one of --atom or --bond is required")

    if args.debug:
        configure_debug_logging()

    try:
        exclude = _parse_indices(args.exclude) if args.exclude else []
        bond = _parse_pair(args.bond) if args.bond else None
        G = graph_from_smiles(args.smiles) if args.smiles else load_graph(args.graph)
    except (GraphFormatError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    origin_atoms = bond if bond is not None else (args.atom,)
    missing = [a for a in origin_atoms if a not in G]
    if missing:
        print(f"Error: atom {missing[0]} is not in the graph", file=sys.stderr)
        return 1
    if bond is not None and not G.has_edge(*bond):
        print(f"Error: atoms {bond[0]} and {bond[1]} are not bonded", file=sys.stderr)
        return 1

    options = RingSearchOptions.from_kwargs(
        all=args.all,
        min=args.min,
        max=args.max,
        size=args.size,
        exclude=exclude,
        mirror=args.mirror,
    )
    if bond is not None:
        rings = find_ring_through_bond(G, bond, options)
    else:
        rings = find_ring(G, args.atom, options)

    if args.aromaticity:
        perceive_aromaticity(G, rings)

    if args.json:
        print(json.dumps({"rings": rings_to_dict(rings)}, indent=2))
    else:
        print(ring_report(G, rings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
