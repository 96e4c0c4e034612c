"""
Utility functions for the grapho_mst package.

This module provides general utility functions used
throughout the package.
"""

from .geometry import *
