from .exceptions import LocationNotFoundError, RouteConsistencyError
from .model import Edge, Route
from .navigation_graph_builder import NavigationGraphBuilder
from .shortest_path_solver import ShortestPathSolver

__all__ = [
    "NavigationGraphBuilder",
    "ShortestPathSolver",
    "Edge",
    "Route",
    "LocationNotFoundError",
    "RouteConsistencyError",
]
