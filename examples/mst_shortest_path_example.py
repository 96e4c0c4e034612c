"""
Example script for computing and plotting a spanning tree and a shortest path.

This script demonstrates how to:
1. Generate a random Euclidean vertex set
2. Find its minimum spanning tree with Prim's algorithm
3. Find the shortest path between two vertices along the tree
4. Rasterize both onto the display grid and plot it
"""

import os
import sys
import matplotlib.pyplot as plt

# Add the parent directory to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from grapho_mst.core import build_distance_matrix, compute_mst, compute_shortest_path
from grapho_mst.utils import Bounds, generate_vertices
from grapho_mst.visualization import CellLabel, Grid, highlight_vertex, plot_grid, rasterize


def main():
    """Run the spanning tree example."""
    print("Grapho MST - Example Script for Spanning Trees and Shortest Paths")
    print("-----------------------------------------------------------------")

    print("\n1. Generating vertices...")
    bounds = Bounds(0, 0, 100, 100)
    points = generate_vertices(80, bounds, seed=2024)
    print(f"Generated {len(points)} vertices in {bounds}")

    print("\n2. Finding the minimum spanning tree...")
    dm = build_distance_matrix(points)
    tree = compute_mst(dm)
    print(f"MST: {len(tree.edges())} edges, total distance {tree.total_weight(dm):.2f}")

    print("\n3. Finding the shortest path from vertex 0 to vertex 79...")
    path = compute_shortest_path(tree, dm, 0, 79)
    print(f"Path: {' -> '.join(str(v) for v in path.vertices)}")
    print(f"Distance: {path.length:.2f}")

    print("\n4. Plotting...")
    grid = Grid()
    rasterize(grid, points, tree.edges(), bounds, CellLabel.EDGE)
    highlight_vertex(grid, points[tree.root], bounds, CellLabel.MST_ROOT)
    rasterize(grid, points, path.edges, bounds, CellLabel.SP_EDGE)
    highlight_vertex(grid, points[path.target], bounds, CellLabel.SP_TARGET)
    highlight_vertex(grid, points[path.source], bounds, CellLabel.SP_SOURCE)

    output_dir = os.path.join(os.path.dirname(__file__), 'output')
    os.makedirs(output_dir, exist_ok=True)
    ax = plot_grid(grid, bounds, title=f"MST {tree.total_weight(dm):.2f}, SP {path.length:.2f}")
    output_path = os.path.join(output_dir, 'mst_shortest_path.png')
    ax.figure.savefig(output_path, bbox_inches='tight', dpi=150)
    plt.close(ax.figure)
    print(f"Saved plot to {output_path}")


if __name__ == "__main__":
    main()
