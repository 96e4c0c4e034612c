"""
Core functionality for grapho_mst.

This module contains the distance matrix, minimum spanning tree and
shortest path computations that the rest of the package builds on.
"""

from .graph import *
from .priority_queue import *
from .distance import *
from .mst import *
from .shortest_path import *
