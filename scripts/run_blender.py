#!/usr/bin/env python
"""
Run Blender demo: expand tank states breadth-first and report the closest blend

Usage:
    python scripts/run_blender.py --tanks 4 --wines 2
    python scripts/run_blender.py --tanks 6 --wines 3 --target data/target.txt --depth 4

Input:
    --target FILE — target composition, one number per line (optional)

Output:
    Summary of the explored arena and the state whose best mix is closest
    (by direction) to the target composition.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from blendsim.config import TankConfig
from blendsim.graph import StateArena
from blendsim.loader import load_mix
from blendsim.mix import Mix
from blendsim.report import format_state
from blendsim.state import State

logger = logging.getLogger("run_blender")


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Enumerate tank transfers for a wine blending bank",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 4 tanks, 2 pure wines, neighbours only
  python scripts/run_blender.py --tanks 4 --wines 2

  # Any tank may feed any other, search 5 steps deep
  python scripts/run_blender.py --tanks 5 --wines 2 --adjacency any --depth 5
        """
    )

    parser.add_argument("--tanks", type=int, default=4, help="Number of tanks (default: 4)")
    parser.add_argument("--wines", type=int, default=2, help="Number of pure wines loaded into the first tanks (default: 2)")
    parser.add_argument(
        "--adjacency",
        choices=["neighbor", "any"],
        default="neighbor",
        help="Transfer locality rule (default: neighbor)"
    )
    parser.add_argument("--depth", type=int, default=3, help="Maximum search depth (default: 3)")
    parser.add_argument("--target", type=str, default=None, help="Target composition file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.wines < 1 or args.wines > args.tanks:
        logger.error("--wines must be in [1, --tanks]")
        sys.exit(1)

    cfg = TankConfig(num_tanks=args.tanks, adjacency=args.adjacency)
    # Каждое чистое вино занимает один полный бак.
    wines = [Mix.from_index(i, args.wines) * cfg.tank_size for i in range(args.wines)]
    root = State.from_mixes(cfg, wines)

    target = load_mix(args.target) if args.target else None
    if target is not None and target.count != args.wines:
        logger.error("target has %d components, expected %d", target.count, args.wines)
        sys.exit(1)

    arena = StateArena(root)
    frontier = [arena.root_id]
    for _ in range(args.depth):
        nxt = []
        for node in frontier:
            nxt.extend(c for c in arena.expand(node) if not arena.is_expanded(c))
        frontier = list(dict.fromkeys(nxt))
        if not frontier:
            break

    logger.info("Explored %d states, %d edges", len(arena), len(arena.edges()))

    best_id = arena.root_id
    if target is not None:
        best_id = min(
            range(len(arena)),
            key=lambda n: target.distance_of_normals(arena[n].best_mix()),
        )

    print(format_state(arena[best_id]))


if __name__ == "__main__":
    main()
