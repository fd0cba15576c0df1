from .checks import nodes_without_exit, replay_edge
from .junctions import Edge, JunctionGraph, build_junction_graph, find_junctions, follow_corridor
