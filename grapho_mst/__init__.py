"""
Grapho MST - Minimum spanning trees and tree shortest paths on random Euclidean point sets.
"""

__version__ = '0.1.0'

# Import main submodules for easy access
from . import core
from . import io
from . import utils
from . import visualization
from . import pipeline
