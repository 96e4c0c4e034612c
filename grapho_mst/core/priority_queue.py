"""
Indexed priority queue for Prim and Dijkstra.

The queue is an array-backed binary min-heap together with a position
index mapping each vertex to its heap slot, so the entry of a vertex can
be found and its distance decreased in O(log N).
"""

from .graph import Edge


__all__ = ['Item', 'IndexedMinHeap']


class Item:
    """
    A queue entry: the best known edge reaching ``vertex`` and its distance.
    """

    __slots__ = ('vertex', 'edge', 'distance', 'index')

    def __init__(self, vertex, edge, distance):
        self.vertex = vertex
        self.edge = edge
        self.distance = distance
        self.index = -1  # heap slot, maintained by the queue

    def key(self):
        # equal distances resolve to the lowest vertex index
        return (self.distance, self.vertex)

    def __repr__(self):
        return f"Item(vertex={self.vertex}, edge={self.edge!r}, distance={self.distance})"


class IndexedMinHeap:
    """
    Binary min-heap of :class:`Item` keyed by vertex.

    Parameters
    ----------
    capacity : int
        Number of vertices; valid keys are ``0 .. capacity - 1``
    """

    def __init__(self, capacity):
        self._heap = []
        self._position = [-1] * capacity

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def __contains__(self, vertex):
        return self._position[vertex] >= 0

    def get(self, vertex):
        slot = self._position[vertex]
        return self._heap[slot] if slot >= 0 else None

    def push(self, vertex, edge: Edge, distance):
        """
        Insert a new entry for ``vertex``.

        Parameters
        ----------
        vertex : int
            Vertex the entry is keyed by
        edge : Edge
            Candidate edge reaching the vertex
        distance : float
            Priority of the entry

        Returns
        -------
        Item
            The inserted item
        """
        if vertex in self:
            raise KeyError(f"Vertex {vertex} is already in the queue")
        item = Item(vertex, edge, distance)
        item.index = len(self._heap)
        self._heap.append(item)
        self._position[vertex] = item.index
        self._sift_up(item.index)
        return item

    def update(self, vertex, edge: Edge, distance):
        """
        Replace the edge and distance of the entry for ``vertex``.

        The heap order is restored in whichever direction the new
        distance requires.
        """
        item = self.get(vertex)
        if item is None:
            raise KeyError(f"Vertex {vertex} is not in the queue")
        item.edge = edge
        item.distance = distance
        self._fix(item.index)
        return item

    def push_or_update(self, vertex, edge, distance):
        if vertex in self:
            return self.update(vertex, edge, distance)
        return self.push(vertex, edge, distance)

    def peek(self):
        if not self._heap:
            raise IndexError("peek from an empty queue")
        return self._heap[0]

    def pop(self):
        """
        Remove and return the item with the smallest distance.

        Returns
        -------
        Item
            The removed item, with ``index`` reset to -1
        """
        if not self._heap:
            raise IndexError("pop from an empty queue")
        last = len(self._heap) - 1
        self._swap(0, last)
        item = self._heap.pop()
        self._position[item.vertex] = -1
        item.index = -1
        if self._heap:
            self._sift_down(0)
        return item

    def clear(self):
        for item in self._heap:
            self._position[item.vertex] = -1
            item.index = -1
        self._heap.clear()

    def _less(self, i, j):
        return self._heap[i].key() < self._heap[j].key()

    def _swap(self, i, j):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j
        self._position[heap[i].vertex] = i
        self._position[heap[j].vertex] = j

    def _fix(self, i):
        if not self._sift_down(i):
            self._sift_up(i)

    def _sift_up(self, i):
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i):
        """Move slot ``i`` down; return True if it moved."""
        start = i
        n = len(self._heap)
        while True:
            smallest = i
            left = 2 * i + 1
            right = left + 1
            if left < n and self._less(left, smallest):
                smallest = left
            if right < n and self._less(right, smallest):
                smallest = right
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest
        return i > start
