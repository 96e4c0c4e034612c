"""
Geometric helpers: plot bounds and random vertex generation.
"""

import math

import numpy as np


__all__ = ['Bounds', 'generate_vertices', 'format_location']


class Bounds:
    """
    Axis-aligned extent of the Euclidean plane being plotted.
    """

    def __init__(self, xmin, ymin, xmax, ymax):
        """
        Initialize Bounds.

        Parameters
        ----------
        xmin, ymin : float
            Lower-left corner
        xmax, ymax : float
            Upper-right corner
        """
        self.xmin = float(xmin)
        self.ymin = float(ymin)
        self.xmax = float(xmax)
        self.ymax = float(ymax)

    @classmethod
    def from_dict(cls, d):
        return cls(d['xmin'], d['ymin'], d['xmax'], d['ymax'])

    def normalized(self):
        """Return bounds with min and max swapped where they are reversed."""
        xmin, xmax = sorted((self.xmin, self.xmax))
        ymin, ymax = sorted((self.ymin, self.ymax))
        return Bounds(xmin, ymin, xmax, ymax)

    @property
    def width(self):
        return self.xmax - self.xmin

    @property
    def height(self):
        return self.ymax - self.ymin

    def diagonal(self):
        return math.hypot(self.width, self.height)

    def is_valid(self):
        return (all(math.isfinite(v) for v in self.as_tuple())
                and self.xmin < self.xmax and self.ymin < self.ymax)

    def as_tuple(self):
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return f"Bounds(xmin={self.xmin}, ymin={self.ymin}, xmax={self.xmax}, ymax={self.ymax})"


def generate_vertices(count, bounds, seed=None):
    """
    Generate vertices uniformly at random inside the bounds.

    Parameters
    ----------
    count : int
        Number of vertices
    bounds : Bounds
        Region to sample from
    seed : int or numpy.random.Generator, optional
        Seed for reproducible point sets

    Returns
    -------
    numpy.ndarray
        (count, 2) array of x, y coordinates
    """
    rng = np.random.default_rng(seed)
    xs = bounds.xmin + bounds.width * rng.random(count)
    ys = bounds.ymin + bounds.height * rng.random(count)
    return np.column_stack((xs, ys))


def format_location(point):
    x, y = point
    return f"({x:.2f}, {y:.2f})"
