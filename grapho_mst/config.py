"""
Configuration for the grapho_mst plotting pipeline.

This module defines the default settings used when generating a
Euclidean point set, computing its minimum spanning tree and the
shortest path between two of its vertices, and drawing both onto
the display grid.
"""

# Display grid settings
GRID_CONFIG = {
    'rows': 300,
    'columns': 300,
    'xlabels': 11,  # number of tick labels on the x axis
    'ylabels': 11,  # number of tick labels on the y axis
    'colors': {
        'empty': '#FFFFFF',
        'edge': '#808080',
        'vertex': '#000000',
        'mst_root': '#00C000',
        'sp_source': '#0000FF',
        'sp_target': '#FF0000',
        'sp_edge': '#FFFF00'
    }
}

# Vertex set settings
VERTEX_CONFIG = {
    'vertices': 100,
    'min_vertices': 2,
    'max_vertices': 500,
    'bounds': {
        'xmin': 0.0,
        'ymin': 0.0,
        'xmax': 100.0,
        'ymax': 100.0
    },
    'seed': None,
    'vertex_file': 'vertices.csv'  # bounds and locations of the last vertex set
}

# Pipeline settings
PIPELINE_CONFIG = {
    'steps': [
        {'name': 'generate_vertices', 'enabled': True, 'params': None},
        {'name': 'find_distances', 'enabled': True, 'params': None},
        {'name': 'find_mst', 'enabled': True, 'params': None},
        {'name': 'find_sp', 'enabled': True, 'params': None},
        {'name': 'plot_mst', 'enabled': True, 'params': None},
        {'name': 'plot_sp', 'enabled': True, 'params': None}
    ],
    'stop_on_error': False,
    'logger': {
        'level': 'INFO',
        'console': True
    }
}

DEFAULT_STATUS = "Enter Source and Target Vertices (0-V-1) for another SP"


class GraphError(Exception):
    """Base error for spanning tree and path computations."""
    pass

class InvalidEndpoints(GraphError, ValueError):
    """Source and/or target vertex out of range or equal."""
    pass

class NoPathFound(GraphError):
    """Target vertex was never reached from the source."""
    pass

class VertexSetError(Exception):
    """Malformed saved vertex set."""
    pass

class PipelineConfigError(Exception):
    """Invalid pipeline configuration."""
    pass
