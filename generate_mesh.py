#!/usr/bin/env python3
"""
Generate a quad mesh and write its graph payload as JSON.

Usage:
    python generate_mesh.py --rings 10 --spacing 40 --seed 0 \
        --iterations 500 --strength 0.08 [--output mesh.json] [--stats]

Omitted options fall back to the QUADMAP_DEFAULT_* settings.
"""

import argparse
import json
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent))

from quadmap.config import configure_logging, settings
from quadmap.core import InvalidConfigurationError, MeshConsistencyError, generate_mesh


def parse_args(argv=None):
    defaults = settings.default_params()

    parser = argparse.ArgumentParser(description="Generate a quad-dominant hex lattice mesh")
    parser.add_argument("--rings", dest="ring_count", type=int, default=defaults["ring_count"],
                        help="number of hex rings around the center")
    parser.add_argument("--spacing", dest="lattice_spacing", type=float,
                        default=defaults["lattice_spacing"],
                        help="distance between lattice points")
    parser.add_argument("--seed", dest="random_seed", type=int, default=defaults["random_seed"],
                        help="random seed")
    parser.add_argument("--iterations", dest="relaxation_iterations", type=int,
                        default=defaults["relaxation_iterations"],
                        help="relaxation iterations")
    parser.add_argument("--strength", dest="relaxation_strength", type=float,
                        default=defaults["relaxation_strength"],
                        help="relaxation strength in (0, 1]")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="write the payload here instead of stdout")
    parser.add_argument("--stats", action="store_true",
                        help="print mesh statistics to stderr")
    parser.add_argument("--log-level", default=None, help="override QUADMAP_LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, log_format="plain")

    try:
        result = generate_mesh({name: getattr(args, name) for name in settings.default_params()})
    except InvalidConfigurationError as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        return 2
    except MeshConsistencyError as e:
        print(f"Mesh generation failed: {e}", file=sys.stderr)
        return 1

    text = json.dumps(result.payload)
    if args.output:
        args.output.write_text(text)
        print(f"Wrote {len(result.payload['tiles'])} tiles to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(text + "\n")

    if args.stats:
        stats = result.statistics
        print(f"Total Quads: {stats.face_count}", file=sys.stderr)
        print(f"Total Vertices: {stats.vertex_count}", file=sys.stderr)
        print(f"Average Area: {stats.average_area:.2f}", file=sys.stderr)
        print(f"Min/Max Area: {stats.min_area:.2f} / {stats.max_area:.2f}", file=sys.stderr)
        print(f"Area Variation: {stats.area_variation_percent:.1f}%", file=sys.stderr)
        print(f"Average Edge Length: {stats.average_edge_length:.2f}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
