"""
Tree data structures for Euclidean point sets.

This module provides the edge, spanning tree and path types shared by
the minimum spanning tree and shortest path computations. Vertices are
referenced everywhere by their index in the point array.
"""

import numpy as np
import geopandas as gpd
import networkx as nx
from shapely.geometry import Point, LineString
from typing import List, Optional, Tuple


__all__ = ['Edge', 'SpanningTree', 'PathResult', 'build_adjacency']


class Edge:
    """
    An undirected edge between two vertices.

    The edge has no direction: ``Edge(1, 2) == Edge(2, 1)``. Code that
    walks along an edge asks for the traversal direction explicitly
    with :meth:`oriented` instead of reordering the endpoints.
    """

    __slots__ = ('v', 'w')

    def __init__(self, v, w):
        """
        Initialize an Edge.

        Parameters
        ----------
        v : int
            One endpoint
        w : int
            The other endpoint
        """
        self.v = int(v)
        self.w = int(w)

    def other(self, vertex):
        """
        Get the endpoint opposite to ``vertex``.

        Parameters
        ----------
        vertex : int
            One of the endpoints of the edge

        Returns
        -------
        int
            The other endpoint
        """
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise ValueError(f"Vertex {vertex} is not an endpoint of {self!r}")

    def oriented(self, start):
        """Return ``(start, end)`` for a traversal beginning at ``start``."""
        return start, self.other(start)

    def endpoints(self):
        return frozenset((self.v, self.w))

    def weight(self, distance_matrix):
        return float(distance_matrix[self.v, self.w])

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints() == other.endpoints()

    def __hash__(self):
        return hash(self.endpoints())

    def __repr__(self):
        return f"Edge(v={self.v}, w={self.w})"


def build_adjacency(edges, vertices):
    """
    Build the adjacency list of a set of edges.

    Parameters
    ----------
    edges : iterable of Edge
        Edges of the graph
    vertices : int
        Number of vertices

    Returns
    -------
    list of list of Edge
        For each vertex, the edges incident to it, in edge order
    """
    adj = [[] for _ in range(vertices)]
    for e in edges:
        adj[e.v].append(e)
        adj[e.w].append(e)
    return adj


class SpanningTree:
    """
    A spanning tree stored as one parent edge per vertex.

    Slot ``i`` holds the edge connecting vertex ``i`` to its parent. The
    root slot holds ``None``.
    """

    def __init__(self, parent_edges: List[Optional[Edge]], root: int = 0):
        """
        Initialize a SpanningTree.

        Parameters
        ----------
        parent_edges : list of Edge or None
            Parent edge of each vertex, ``None`` for the root
        root : int, optional
            Root vertex of the tree
        """
        self.parent_edges = parent_edges
        self.root = root

    def __len__(self):
        return len(self.parent_edges)

    def edges(self) -> List[Edge]:
        """
        Get the tree edges in vertex order, skipping the root slot.

        Returns
        -------
        list of Edge
            The N-1 edges of the tree
        """
        return [e for i, e in enumerate(self.parent_edges) if i != self.root and e is not None]

    def parent(self, vertex):
        """Return the parent of ``vertex``, or None for the root."""
        e = self.parent_edges[vertex]
        if vertex == self.root or e is None:
            return None
        return e.other(vertex)

    def adjacency(self):
        return build_adjacency(self.edges(), len(self))

    def total_weight(self, distance_matrix) -> float:
        """
        Sum of the edge weights of the tree.

        Parameters
        ----------
        distance_matrix : numpy.ndarray
            Matrix the tree was built from

        Returns
        -------
        float
            Total weight
        """
        return float(sum(e.weight(distance_matrix) for e in self.edges()))

    def to_networkx(self, distance_matrix=None):
        """
        Convert the tree to a NetworkX graph.

        Parameters
        ----------
        distance_matrix : numpy.ndarray, optional
            If given, edges carry a ``weight`` attribute

        Returns
        -------
        networkx.Graph
            Undirected graph with one node per vertex
        """
        g = nx.Graph()
        g.add_nodes_from(range(len(self)))
        for e in self.edges():
            if distance_matrix is None:
                g.add_edge(e.v, e.w)
            else:
                g.add_edge(e.v, e.w, weight=e.weight(distance_matrix))
        return g

    def to_geodataframes(self, points, crs=None):
        """
        Convert the tree to GeoDataFrames.

        Parameters
        ----------
        points : array-like
            (N, 2) vertex coordinates
        crs : str, optional
            Coordinate reference system of the output

        Returns
        -------
        tuple of GeoDataFrame
            (nodes_gdf, edges_gdf)
        """
        points = np.asarray(points, dtype=float)

        nodes_data = []
        for i, (x, y) in enumerate(points):
            nodes_data.append({
                "id": i,
                "geometry": Point(x, y),
                "is_root": i == self.root
            })

        edges_data = []
        for e in self.edges():
            p1, p2 = points[e.v], points[e.w]
            line = LineString([tuple(p1), tuple(p2)])
            edges_data.append({
                "source": e.v,
                "target": e.w,
                "length": line.length,
                "geometry": line
            })

        nodes_gdf = gpd.GeoDataFrame(nodes_data, geometry="geometry", crs=crs)
        edges_gdf = gpd.GeoDataFrame(edges_data, columns=["source", "target", "length", "geometry"],
                                     geometry="geometry", crs=crs)

        return nodes_gdf, edges_gdf

    def __repr__(self):
        return f"SpanningTree(vertices={len(self)}, root={self.root})"


class PathResult:
    """
    A path between two vertices of a spanning tree.
    """

    def __init__(self, source, target, vertices, length):
        """
        Initialize a PathResult.

        Parameters
        ----------
        source : int
            First vertex of the path
        target : int
            Last vertex of the path
        vertices : list of int
            Vertices from source to target, inclusive
        length : float
            Sum of the edge weights along the path
        """
        self.source = source
        self.target = target
        self.vertices = list(vertices)
        self.length = float(length)

    @property
    def edges(self) -> List[Edge]:
        return [Edge(a, b) for a, b in self.steps()]

    def steps(self) -> List[Tuple[int, int]]:
        """Return the ``(from, to)`` pairs walked from source to target."""
        return list(zip(self.vertices[:-1], self.vertices[1:]))

    def reversed(self):
        return PathResult(self.target, self.source, self.vertices[::-1], self.length)

    def __len__(self):
        return max(len(self.vertices) - 1, 0)

    def __repr__(self):
        return f"PathResult(source={self.source}, target={self.target}, length={self.length:.2f})"
