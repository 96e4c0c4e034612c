"""
Functions for rendering a display grid with matplotlib.
"""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap, BoundaryNorm
from matplotlib.patches import Patch

from ..config import GRID_CONFIG
from .grid import CellLabel, axis_labels


__all__ = ['grid_colormap', 'plot_grid']

LEGEND_NAMES = {
    CellLabel.EDGE: 'MST edge',
    CellLabel.VERTEX: 'Vertex',
    CellLabel.MST_ROOT: 'MST start',
    CellLabel.SP_SOURCE: 'SP source',
    CellLabel.SP_TARGET: 'SP target',
    CellLabel.SP_EDGE: 'SP edge',
}


def grid_colormap(colors=None):
    """
    Build a colormap with one colour per cell label.

    Parameters
    ----------
    colors : dict, optional
        Mapping of lowercase label name to colour, defaults to
        ``GRID_CONFIG['colors']``

    Returns
    -------
    tuple
        (cmap, norm) for use with ``imshow``
    """
    colors = {**GRID_CONFIG['colors'], **(colors or {})}
    cmap = ListedColormap([colors[label.name.lower()] for label in CellLabel])
    bounds = np.arange(len(CellLabel) + 1) - 0.5
    norm = BoundaryNorm(bounds, cmap.N)
    return cmap, norm


def plot_grid(grid, bounds, figsize=(8, 8), colors=None, xlabels=None, ylabels=None,
              title=None, legend=True, ax=None):
    """
    Plot a rasterized grid.

    Parameters
    ----------
    grid : Grid
        Grid to plot
    bounds : Bounds
        Plot extent the grid was rasterized with, used for tick labels
    figsize : tuple, optional
        Figure size (width, height) in inches
    colors : dict, optional
        Colour overrides per label name
    xlabels, ylabels : int, optional
        Number of tick labels on each axis
    title : str, optional
        Plot title
    legend : bool, optional
        Whether to add a legend of the labels present in the grid
    ax : matplotlib.axes.Axes, optional
        Axes to plot on

    Returns
    -------
    matplotlib.axes.Axes
        The axes containing the plot
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    cmap, norm = grid_colormap(colors)
    ax.imshow(grid.cells, cmap=cmap, norm=norm, interpolation='nearest', origin='upper')

    # Tick labels in plot coordinates; row 0 is ymax
    nx_labels = GRID_CONFIG['xlabels'] if xlabels is None else xlabels
    ny_labels = GRID_CONFIG['ylabels'] if ylabels is None else ylabels
    ax.set_xticks(np.linspace(0, grid.columns - 1, nx_labels))
    ax.set_xticklabels(axis_labels(bounds.xmin, bounds.xmax, nx_labels), rotation=45)
    ax.set_yticks(np.linspace(0, grid.rows - 1, ny_labels))
    ax.set_yticklabels(axis_labels(bounds.ymax, bounds.ymin, ny_labels))

    if legend:
        cmap_colors = cmap.colors
        handles = [Patch(facecolor=cmap_colors[label], edgecolor='black', label=name)
                   for label, name in LEGEND_NAMES.items() if grid.count(label)]
        if handles:
            ax.legend(handles=handles, loc='upper left', bbox_to_anchor=(1.01, 1.0))

    if title:
        ax.set_title(title)

    ax.set_aspect('equal')

    return ax
