"""
Rasterization of vertices and edges onto a fixed-size display grid.

Coordinates are mapped to cells with row 0 at the top of the display
(largest y) and column 0 at the left (smallest x). Each call writes its
labels over whatever is already in the grid; the last write wins.
"""

import logging
from enum import IntEnum

import numpy as np

from ..config import GRID_CONFIG


__all__ = ['CellLabel', 'Grid', 'rasterize', 'highlight_vertex', 'axis_labels']

logger = logging.getLogger(__name__)


class CellLabel(IntEnum):
    EMPTY = 0
    EDGE = 1
    VERTEX = 2
    MST_ROOT = 3
    SP_SOURCE = 4
    SP_TARGET = 5
    SP_EDGE = 6


# class names used by the HTML presentation of the grid
CSS_CLASSES = {
    CellLabel.EMPTY: "",
    CellLabel.EDGE: "edge",
    CellLabel.VERTEX: "vertex",
    CellLabel.MST_ROOT: "startvertexMSS",
    CellLabel.SP_SOURCE: "vertexSP1",
    CellLabel.SP_TARGET: "vertexSP2",
    CellLabel.SP_EDGE: "edgeSP",
}


class Grid:
    """
    A ROWS x COLUMNS array of cell labels.
    """

    def __init__(self, rows=None, columns=None):
        """
        Initialize an empty Grid.

        Parameters
        ----------
        rows : int, optional
            Number of rows (defaults to ``GRID_CONFIG['rows']``)
        columns : int, optional
            Number of columns (defaults to ``GRID_CONFIG['columns']``)
        """
        self.rows = int(GRID_CONFIG['rows'] if rows is None else rows)
        self.columns = int(GRID_CONFIG['columns'] if columns is None else columns)
        if self.rows < 2 or self.columns < 2:
            raise ValueError(f"Grid needs at least 2 rows and 2 columns, got {self.rows}x{self.columns}")
        self.cells = np.full((self.rows, self.columns), CellLabel.EMPTY, dtype=np.int8)

    @property
    def shape(self):
        return self.cells.shape

    def __getitem__(self, index):
        return self.cells[index]

    def label_at(self, row, col):
        return CellLabel(int(self.cells[row, col]))

    def count(self, label):
        return int(np.count_nonzero(self.cells == label))

    def scales(self, bounds):
        """
        Cells per unit length along each axis.

        Returns
        -------
        tuple of float
            (xscale, yscale)
        """
        xscale = (self.columns - 1) / (bounds.xmax - bounds.xmin)
        yscale = (self.rows - 1) / (bounds.ymax - bounds.ymin)
        return xscale, yscale

    def to_cells(self, xs, ys, bounds):
        """
        Map coordinates to (row, col) cell indices, rounding half up.

        Parameters
        ----------
        xs, ys : float or array-like
            Coordinates to map
        bounds : Bounds
            Plot extent

        Returns
        -------
        tuple of numpy.ndarray
            (rows, cols) integer indices; may fall outside the grid
        """
        xscale, yscale = self.scales(bounds)
        rows = np.floor((bounds.ymax - np.asarray(ys, dtype=float)) * yscale + 0.5).astype(int)
        cols = np.floor((np.asarray(xs, dtype=float) - bounds.xmin) * xscale + 0.5).astype(int)
        return rows, cols

    def inside(self, rows, cols):
        return (rows >= 0) & (rows < self.rows) & (cols >= 0) & (cols < self.columns)

    def set_cells(self, rows, cols, label):
        """Label the given cells, silently skipping those outside the grid."""
        rows = np.atleast_1d(rows)
        cols = np.atleast_1d(cols)
        mask = self.inside(rows, cols)
        self.cells[rows[mask], cols[mask]] = label

    def to_css_classes(self):
        """
        Flatten the grid into CSS class names, row by row.

        Returns
        -------
        list of str
            ``rows * columns`` class names
        """
        return [CSS_CLASSES[CellLabel(v)] for v in self.cells.ravel()]

    def __repr__(self):
        return f"Grid(rows={self.rows}, columns={self.columns})"


def _edge_samples(grid, p1, p2, bounds, diagonal):
    """Interpolated sample cells of one edge, excluding its end point."""
    length = float(np.hypot(*(p2 - p1)))
    if length == 0.0:
        return None

    ncells = int(np.floor(grid.columns * length / diagonal + 0.5))
    # never fewer samples than cells spanned, so the drawn edge has no gaps
    (r1, r2), (c1, c2) = grid.to_cells([p1[0], p2[0]], [p1[1], p2[1]], bounds)
    ncells = max(ncells, abs(int(r2 - r1)), abs(int(c2 - c1)))
    if ncells == 0:
        return np.empty(0, dtype=int), np.empty(0, dtype=int)

    t = np.arange(ncells) / ncells
    xs = p1[0] + (p2[0] - p1[0]) * t
    ys = p1[1] + (p2[1] - p1[1]) * t
    return grid.to_cells(xs, ys, bounds)


def rasterize(grid, points, edges, bounds, label=CellLabel.EDGE):
    """
    Draw edges and their endpoint vertices onto the grid.

    Every edge is sampled by linear interpolation between its endpoints
    and the sampled cells are set to ``label``. Once all edges are
    drawn, their endpoint cells are set to ``CellLabel.VERTEX``, so a
    vertex is never hidden by an edge passing through its cell.

    Parameters
    ----------
    grid : Grid
        Grid to draw on, modified in place
    points : array-like
        (N, 2) vertex coordinates
    edges : iterable of Edge
        Edges to draw, e.g. ``tree.edges()`` or ``path.edges``
    bounds : Bounds
        Plot extent; ``xmin < xmax`` and ``ymin < ymax``
    label : CellLabel, optional
        Label for edge cells (``EDGE`` for the tree, ``SP_EDGE`` for a path)

    Returns
    -------
    Grid
        The same grid
    """
    if not bounds.is_valid():
        raise ValueError(f"Invalid plot bounds: {bounds!r}")

    coords = np.asarray(points, dtype=float).reshape(-1, 2)
    diagonal = bounds.diagonal()
    endpoints = []

    for e in edges:
        p1, p2 = coords[e.v], coords[e.w]
        samples = _edge_samples(grid, p1, p2, bounds, diagonal)
        if samples is None:
            logger.debug("Skipping zero-length edge %r", e)
        else:
            grid.set_cells(samples[0], samples[1], label)
        endpoints.extend((e.v, e.w))

    if endpoints:
        vertex_coords = coords[np.unique(endpoints)]
        rows, cols = grid.to_cells(vertex_coords[:, 0], vertex_coords[:, 1], bounds)
        grid.set_cells(rows, cols, CellLabel.VERTEX)

    return grid


def highlight_vertex(grid, point, bounds, label):
    """
    Mark a vertex with a plus shape: its cell and the four neighbours.

    Parameters
    ----------
    grid : Grid
        Grid to draw on, modified in place
    point : array-like
        x, y coordinates of the vertex
    bounds : Bounds
        Plot extent
    label : CellLabel
        Highlight label (``MST_ROOT``, ``SP_SOURCE`` or ``SP_TARGET``)
    """
    rows, cols = grid.to_cells(point[0], point[1], bounds)
    row, col = int(rows), int(cols)
    grid.set_cells(np.array([row, row + 1, row - 1, row, row]),
                   np.array([col, col, col, col + 1, col - 1]), label)
    return grid


def axis_labels(lo, hi, count):
    """
    Evenly spaced tick labels from ``lo`` to ``hi``.

    Parameters
    ----------
    lo, hi : float
        Axis range
    count : int
        Number of labels, at least 1

    Returns
    -------
    list of str
        Labels formatted with two decimals
    """
    count = int(count)
    if count < 1:
        raise ValueError(f"Need at least one axis label, got {count}")
    if count == 1:
        return [f"{lo:.2f}"]
    incr = (hi - lo) / (count - 1)
    return [f"{lo + i * incr:.2f}" for i in range(count)]
