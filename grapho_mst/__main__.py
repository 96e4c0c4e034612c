"""
Command line interface for grapho_mst.

Generates a random vertex set, finds its minimum spanning tree and the
shortest path between two vertices along the tree, and renders the
result.

Examples:
    python -m grapho_mst --vertices 50 --xmax 100 --ymax 100 --output mst.png
    python -m grapho_mst --source 3 --target 17 --output sp.png
"""

import argparse
import logging
import sys

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .config import VERTEX_CONFIG
from .io import export_grid_raster, export_tree
from .pipeline import MSTPipeline, PipelineConfig
from .visualization import plot_grid

logger = logging.getLogger('grapho_mst')


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='grapho_mst',
        description='Prim minimum spanning tree and Dijkstra shortest path on a random Euclidean graph')

    parser.add_argument('--config', type=str,
                        help='Path to a JSON configuration file (optional)')
    parser.add_argument('--vertices', type=int,
                        help=f"Number of vertices (default: {VERTEX_CONFIG['vertices']})")

    defaults = VERTEX_CONFIG['bounds']
    for name in ('xmin', 'ymin', 'xmax', 'ymax'):
        parser.add_argument(f'--{name}', type=float,
                            help=f"{name} of the Euclidean plane (default: {defaults[name]})")

    parser.add_argument('--source', type=int,
                        help='Source vertex of the shortest path (0 to V-1)')
    parser.add_argument('--target', type=int,
                        help='Target vertex of the shortest path (0 to V-1)')
    parser.add_argument('--seed', type=int,
                        help='Random seed for the vertex locations')
    parser.add_argument('--vertex-file', type=str,
                        help=f"CSV file holding the last vertex set (default: {VERTEX_CONFIG['vertex_file']})")
    parser.add_argument('--output', type=str,
                        help='Save the rendered grid to this image file')
    parser.add_argument('--export-tree', type=str,
                        help='Export the tree to a vector file (.gpkg, .geojson, .shp)')
    parser.add_argument('--export-raster', type=str,
                        help='Export the grid labels to a GeoTIFF')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')

    return parser.parse_args(argv)


def build_config(args):
    """Merge command line arguments over the configuration defaults."""
    config = PipelineConfig(config_file=args.config)

    # root logging is configured in main()
    overrides = {'logger': {**config.get('logger', {}), 'level': args.log_level, 'console': False}}
    if args.vertices is not None:
        overrides['vertices'] = args.vertices
    bounds = dict(config.get('bounds'))
    for name in ('xmin', 'ymin', 'xmax', 'ymax'):
        value = getattr(args, name)
        if value is not None:
            bounds[name] = value
    overrides['bounds'] = bounds
    for key in ('source', 'target', 'seed', 'vertex_file'):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value

    config.config.update(overrides)
    return config


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    pipeline = MSTPipeline(build_config(args))
    plot = pipeline.run()
    context = pipeline.context

    print(f"Vertices: {plot.vertices}")
    print(f"MST distance: {plot.distance} (start {plot.start_location})")
    if plot.distance_sp:
        print(f"SP {plot.source} {plot.source_location} -> {plot.target} {plot.target_location}: "
              f"{plot.distance_sp}")
    print(f"Status: {plot.status}")

    if context['grid'] is None:
        return 1

    if args.output:
        ax = plot_grid(context['grid'], context['bounds'],
                       title=f"MST distance {plot.distance}"
                             + (f", SP distance {plot.distance_sp}" if plot.distance_sp else ""))
        ax.figure.savefig(args.output, bbox_inches='tight', dpi=150)
        plt.close(ax.figure)
        logger.info(f"Saved plot to {args.output}")

    if args.export_tree:
        paths = export_tree(context['tree'], context['points'], args.export_tree)
        logger.info(f"Exported tree to {', '.join(paths)}")

    if args.export_raster:
        export_grid_raster(context['grid'], context['bounds'], args.export_raster)
        logger.info(f"Exported grid to {args.export_raster}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
