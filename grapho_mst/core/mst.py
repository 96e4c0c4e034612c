"""
Minimum spanning tree of a complete Euclidean graph (Prim's algorithm).
"""

import logging

import numpy as np

from .distance import SENTINEL
from .graph import Edge, SpanningTree
from .priority_queue import IndexedMinHeap


__all__ = ['compute_mst']

logger = logging.getLogger(__name__)


def compute_mst(distance_matrix, root=0):
    """
    Find the minimum spanning tree with Prim's algorithm.

    The tree grows from ``root`` one vertex at a time. Each unvisited
    vertex keeps the shortest known edge to the tree in an indexed
    priority queue; the closest vertex is popped, added to the tree, and
    the edges from it to every unvisited vertex are relaxed.

    Parameters
    ----------
    distance_matrix : numpy.ndarray
        (N, N) matrix from :func:`build_distance_matrix`
    root : int, optional
        Start vertex; its slot in the result holds no edge

    Returns
    -------
    SpanningTree
        Parent edge of every vertex. Empty when N is 0.
    """
    dm = np.asarray(distance_matrix)
    vertices = dm.shape[0]
    if vertices == 0:
        return SpanningTree([], root=root)
    if not 0 <= root < vertices:
        raise ValueError(f"Root vertex {root} out of range for {vertices} vertices")

    parent_edges = [None] * vertices
    marked = np.zeros(vertices, dtype=bool)
    dist_to = np.full(vertices, SENTINEL)

    pq = IndexedMinHeap(vertices)
    pq.push(root, Edge(root, root), SENTINEL)

    def visit(v):
        marked[v] = True
        row = dm[v]
        # unvisited vertices for which v is a new best connection to the tree
        for w in np.flatnonzero(~marked & (row < dist_to)):
            w = int(w)
            dist = float(row[w])
            edge = Edge(v, w)
            parent_edges[w] = edge
            dist_to[w] = dist
            pq.push_or_update(w, edge, dist)

    pops = 0
    while pq:
        item = pq.pop()
        visit(item.vertex)
        pops += 1

    tree = SpanningTree(parent_edges, root=root)
    logger.debug("Prim MST: %d vertices, %d pops", vertices, pops)
    return tree
