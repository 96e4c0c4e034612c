"""
Functions for loading saved vertex sets.
"""

import logging
import os

import numpy as np
import pandas as pd

from ..config import VertexSetError
from ..utils.geometry import Bounds


__all__ = ['load_vertex_set']

logger = logging.getLogger(__name__)


def _parse_bounds(line, filepath):
    values = line.strip().split(',')
    if len(values) < 4:
        raise VertexSetError(f"Bounds line in {filepath} has {len(values)} values, expected 4")
    try:
        xmin, ymin, xmax, ymax = (float(v) for v in values[:4])
    except ValueError as e:
        raise VertexSetError(f"Could not parse bounds line in {filepath}: {e}")
    return Bounds(xmin, ymin, xmax, ymax)


def load_vertex_set(filepath):
    """
    Load a vertex set saved with :func:`save_vertex_set`.

    The first line holds ``xmin,ymin,xmax,ymax``; every following line
    holds the ``x,y`` location of one vertex. Vertex lines that cannot
    be parsed are skipped with a warning.

    Parameters
    ----------
    filepath : str
        Path to the CSV file

    Returns
    -------
    tuple
        (bounds, points) where bounds is a Bounds and points is an
        (N, 2) numpy array
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, 'r') as f:
        first_line = f.readline()
    if not first_line.strip():
        raise VertexSetError(f"Vertex set file {filepath} is empty")
    bounds = _parse_bounds(first_line, filepath)

    try:
        df = pd.read_csv(filepath, skiprows=1, header=None, dtype=str,
                         skip_blank_lines=True, on_bad_lines='skip')
    except pd.errors.EmptyDataError:
        return bounds, np.empty((0, 2))

    if df.shape[1] < 2:
        raise VertexSetError(f"Vertex lines in {filepath} must hold x,y values")

    values = df.iloc[:, :2]
    bad_rows = values.apply(pd.to_numeric, errors='coerce').isna().any(axis=1)
    if bad_rows.any():
        logger.warning(f"Skipping {int(bad_rows.sum())} unparseable vertex lines in {filepath}")
        values = values[~bad_rows]

    # float() parsing keeps the saved values bit-exact
    return bounds, values.astype(float).to_numpy()
