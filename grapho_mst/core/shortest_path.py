"""
Shortest path between two vertices along the edges of a spanning tree.

Dijkstra's single-source relaxation is run over the tree adjacency only;
edge weights come from the distance matrix. Since a tree has exactly one
simple path between any two vertices, the first time the target leaves
the queue its path is final.
"""

import logging

import numpy as np

from ..config import InvalidEndpoints, NoPathFound
from .distance import SENTINEL
from .graph import Edge, PathResult
from .priority_queue import IndexedMinHeap


__all__ = ['compute_shortest_path']

logger = logging.getLogger(__name__)


def _check_endpoints(source, target, vertices):
    if source == target:
        raise InvalidEndpoints(f"Source and target are the same vertex ({source})")
    for name, vertex in (("source", source), ("target", target)):
        if not 0 <= vertex < vertices:
            raise InvalidEndpoints(
                f"{name.capitalize()} vertex {vertex} out of range 0-{vertices - 1}")


def compute_shortest_path(tree, distance_matrix, source, target):
    """
    Find the path from ``source`` to ``target`` in a spanning tree.

    Parameters
    ----------
    tree : SpanningTree
        Tree to search
    distance_matrix : numpy.ndarray
        Matrix giving the weight of each tree edge
    source : int
        Start vertex
    target : int
        End vertex

    Returns
    -------
    PathResult
        Vertices from source to target and the total length

    Raises
    ------
    InvalidEndpoints
        If source or target is outside ``[0, N)`` or they are equal
    NoPathFound
        If the target cannot be reached from the source
    """
    dm = np.asarray(distance_matrix)
    vertices = len(tree)
    _check_endpoints(source, target, vertices)

    adj = tree.adjacency()
    edge_to = [None] * vertices
    dist_to = np.full(vertices, SENTINEL)

    pq = IndexedMinHeap(vertices)

    def relax(v):
        for e in adj[v]:
            _, w = e.oriented(v)
            new_distance = dist_to[v] + dm[v, w]
            if new_distance < dist_to[w]:
                edge_to[w] = e
                dist_to[w] = new_distance
                pq.push_or_update(w, e, float(new_distance))

    dist_to[source] = 0.0
    pq.push(source, Edge(source, source), 0.0)

    while pq:
        item = pq.pop()
        if item.vertex == target:
            pq.clear()
            break
        relax(item.vertex)

    if dist_to[target] == SENTINEL:
        raise NoPathFound(f"Distance to vertex {target} not found")

    # walk the predecessor edges back from the target
    path = [target]
    v = target
    while v != source:
        v = edge_to[v].other(v)
        path.append(v)
    path.reverse()

    result = PathResult(source, target, path, dist_to[target])
    logger.debug("Shortest path %d -> %d: %d edges, length %.4f",
                 source, target, len(result), result.length)
    return result
