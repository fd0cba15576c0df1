import pytest

from hike_lab.core.directions import Mode
from hike_lab.core.grid import parse_grid
from hike_lab.graph.junctions import build_junction_graph
from hike_lab.problems.sample import SAMPLE_MAZE


@pytest.fixture
def sample_grid():
    return parse_grid(SAMPLE_MAZE)


@pytest.fixture
def directed_graph(sample_grid):
    return build_junction_graph(sample_grid, Mode.DIRECTED)


@pytest.fixture
def undirected_graph(sample_grid):
    return build_junction_graph(sample_grid, Mode.UNDIRECTED)
