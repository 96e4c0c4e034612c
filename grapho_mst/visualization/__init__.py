"""
Visualization functions for spanning trees and shortest paths.

This module provides the display grid the trees are drawn onto and
functions for rendering it.
"""

from .grid import *
from .plot import *
