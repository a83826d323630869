import math
from typing import Sequence

import networkx as nx

from location_catalog import Location
from navigation_graph.model import Edge


class NavigationGraphBuilder:
    """
    NavigationGraphBuilder derives a sparse, directed navigation graph from
    a set of campus locations. Every location is connected to its
    `neighbor_count` geometrically nearest locations, with the Euclidean
    distance stored as the `weight` attribute of the edge.

    Nearest-neighbor relations are not symmetric, so an edge A -> B does not
    imply an edge B -> A. Candidates at equal distance keep their relative
    catalog order. Successors of each node are inserted in ascending
    distance order and networkx preserves that order.

    Neighbor selection compares every pair of locations, which is fine for
    campus-sized catalogs but would need a spatial index for large ones.
    """

    def __init__(self, locations: Sequence[Location], neighbor_count: int = 3):
        if neighbor_count <= 0:
            raise ValueError("neighbor_count must be greater than 0.")

        self._locations = list(locations)
        self._neighbor_count = neighbor_count

    @property
    def neighbor_count(self) -> int:
        return self._neighbor_count

    @staticmethod
    def euclidean_distance(source: Location, destination: Location) -> float:
        return math.sqrt(
            (destination.x - source.x) ** 2 + (destination.y - source.y) ** 2
        )

    def _get_nearest_neighbors(self, location: Location) -> list[tuple[int, float]]:
        candidates = [
            (other.id, self.euclidean_distance(location, other))
            for other in self._locations
            if other.id != location.id
        ]
        candidates.sort(key=lambda candidate: candidate[1])

        return candidates[: self._neighbor_count]

    def build_graph(self) -> "nx.DiGraph[int]":
        """
        Builds a directed graph with exactly one node per location.
        Nodes: location IDs.
        Edges: `weight` attribute holding the distance between locations.
        """

        graph: "nx.DiGraph[int]" = nx.DiGraph()
        graph.add_nodes_from(location.id for location in self._locations)

        for location in self._locations:
            for neighbor_id, distance in self._get_nearest_neighbors(location):
                graph.add_edge(location.id, neighbor_id, weight=distance)

        return graph

    @staticmethod
    def to_adjacency(graph: "nx.DiGraph[int]") -> dict[int, list[Edge]]:
        return {
            node: [
                Edge(to=successor, weight=graph[node][successor]["weight"])
                for successor in graph.successors(node)
            ]
            for node in graph.nodes
        }
