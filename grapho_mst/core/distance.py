"""
Euclidean distance matrix for planar point sets.
"""

import numpy as np
from scipy.spatial.distance import cdist


__all__ = ['SENTINEL', 'build_distance_matrix']

# Marks "self" on the diagonal and "not reached yet" in distance tables.
# Larger than any real distance between finite points.
SENTINEL = np.finfo(np.float64).max


def build_distance_matrix(points):
    """
    Compute pairwise Euclidean distances between vertices.

    Parameters
    ----------
    points : array-like
        (N, 2) array of vertex coordinates

    Returns
    -------
    numpy.ndarray
        Read-only (N, N) symmetric matrix; the diagonal holds ``SENTINEL``
        so a vertex is never selected as its own nearest neighbour
    """
    coords = np.asarray(points, dtype=np.float64).reshape(-1, 2)

    if len(coords) == 0:
        matrix = np.zeros((0, 0), dtype=np.float64)
    else:
        matrix = cdist(coords, coords)
        # cdist is symmetric up to rounding; copy the upper triangle down
        lower = np.tril_indices(len(coords), -1)
        matrix[lower] = matrix.T[lower]
        np.fill_diagonal(matrix, SENTINEL)

    matrix.setflags(write=False)
    return matrix
