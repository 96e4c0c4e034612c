"""
Functions for saving vertex sets and exporting trees and grids.
"""

import os

import numpy as np
import pandas as pd
import rasterio
from rasterio.transform import from_origin


__all__ = ['save_vertex_set', 'export_tree', 'export_grid_raster']


def _ensure_directory(filepath):
    os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)


def save_vertex_set(filepath, bounds, points):
    """
    Save the bounds and vertex locations to a CSV file.

    Parameters
    ----------
    filepath : str
        Path to the output file
    bounds : Bounds
        Plot extent, written on the first line
    points : array-like
        (N, 2) vertex coordinates, one ``x,y`` line each
    """
    _ensure_directory(filepath)

    df = pd.DataFrame(np.asarray(points, dtype=float).reshape(-1, 2), columns=['x', 'y'])
    # %.17g round-trips every float64 so a reloaded set gives the same tree
    with open(filepath, 'w', newline='') as f:
        f.write("%.17g,%.17g,%.17g,%.17g\n" % bounds.as_tuple())
        df.to_csv(f, header=False, index=False, float_format='%.17g')


def export_tree(tree, points, filepath, crs=None, driver=None):
    """
    Export a spanning tree's vertices and edges to a vector file.

    Parameters
    ----------
    tree : SpanningTree
        Tree to export
    points : array-like
        (N, 2) vertex coordinates
    filepath : str
        Path to the output file. GeoPackage files get ``vertices`` and
        ``edges`` layers; other formats get ``<name>_vertices`` and
        ``<name>_edges`` files next to ``filepath``.
    crs : str, optional
        Coordinate reference system of the output
    driver : str, optional
        Driver name for the output (auto-detected from extension if not provided)

    Returns
    -------
    list of str
        Paths written
    """
    _, ext = os.path.splitext(filepath)

    if driver is None:
        if ext.lower() == '.gpkg':
            driver = 'GPKG'
        elif ext.lower() == '.shp':
            driver = 'ESRI Shapefile'
        elif ext.lower() in ['.geojson', '.json']:
            driver = 'GeoJSON'
        else:
            raise ValueError(f"Unsupported file format: {ext}")

    _ensure_directory(filepath)
    nodes_gdf, edges_gdf = tree.to_geodataframes(points, crs=crs)

    if driver == 'GPKG':
        nodes_gdf.to_file(filepath, layer='vertices', driver=driver)
        edges_gdf.to_file(filepath, layer='edges', driver=driver)
        return [filepath]

    base, ext = os.path.splitext(filepath)
    nodes_path = f"{base}_vertices{ext}"
    edges_path = f"{base}_edges{ext}"
    nodes_gdf.to_file(nodes_path, driver=driver)
    edges_gdf.to_file(edges_path, driver=driver)
    return [nodes_path, edges_path]


def export_grid_raster(grid, bounds, filepath, crs=None):
    """
    Export a rasterized grid to a single-band GeoTIFF of cell labels.

    Parameters
    ----------
    grid : Grid
        Grid to export
    bounds : Bounds
        Plot extent the grid was rasterized with
    filepath : str
        Path to the output file
    crs : str or dict, optional
        Coordinate reference system
    """
    _ensure_directory(filepath)

    # cell centres sit on the bounds, so the raster extends half a cell past them
    xres = bounds.width / (grid.columns - 1)
    yres = bounds.height / (grid.rows - 1)
    transform = from_origin(bounds.xmin - xres / 2, bounds.ymax + yres / 2, xres, yres)

    data = grid.cells.astype(np.uint8)
    with rasterio.open(
        filepath,
        'w',
        driver='GTiff',
        height=data.shape[0],
        width=data.shape[1],
        count=1,
        dtype=data.dtype,
        crs=crs,
        transform=transform,
        nodata=None
    ) as dst:
        dst.write(data, 1)
