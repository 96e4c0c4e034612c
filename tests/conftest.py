import logging

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from grapho_mst.core import build_distance_matrix, compute_mst
from grapho_mst.utils import Bounds, generate_vertices


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture
def square_points():
    return np.array([[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0]])


@pytest.fixture
def square_bounds():
    return Bounds(0, 0, 10, 10)


@pytest.fixture
def square_dm(square_points):
    return build_distance_matrix(square_points)


@pytest.fixture
def square_tree(square_dm):
    return compute_mst(square_dm)


@pytest.fixture
def random_bounds():
    return Bounds(-50, 0, 150, 100)


@pytest.fixture
def random_points(random_bounds):
    return generate_vertices(60, random_bounds, seed=7)


@pytest.fixture
def random_dm(random_points):
    return build_distance_matrix(random_points)


@pytest.fixture
def random_tree(random_dm):
    return compute_mst(random_dm)
