"""
Input/output operations for vertex sets and computed trees.

This module provides functions for saving and loading vertex sets
and exporting trees and grids in geospatial formats.
"""

from .loaders import *
from .exporters import *
