import heapq
import math
from functools import cached_property
from typing import Sequence

import networkx as nx

from location_catalog import Coordinates, Location
from navigation_graph.exceptions import LocationNotFoundError, RouteConsistencyError
from navigation_graph.model import Route


class ShortestPathSolver:
    """
    ShortestPathSolver runs Dijkstra's algorithm over a navigation graph
    built by NavigationGraphBuilder and turns the cheapest path into a Route.

    Each node is either unsettled (infinite distance), tentative (finite
    distance which may still decrease) or settled. A node is settled when it
    is popped from the priority queue, after which its distance is final.
    The search stops as soon as the end node is popped.

    The location catalog is needed to resolve path IDs into coordinates and
    has to be the same catalog the graph was built from.
    """

    def __init__(self, graph: "nx.DiGraph[int]", locations: Sequence[Location]):
        self._graph = graph
        self._locations = locations

    @cached_property
    def _locations_by_id(self) -> dict[int, Location]:
        return {location.id: location for location in self._locations}

    def _get_distances_and_predecessors(
        self, start_id: int, end_id: int
    ) -> tuple[dict[int, float], dict[int, int | None]]:
        distances = {node: math.inf for node in self._graph.nodes}
        predecessors: dict[int, int | None] = {node: None for node in self._graph.nodes}
        distances[start_id] = 0.0

        # Equal distances are settled in ascending ID order
        queue = [(0.0, start_id)]
        settled: set[int] = set()

        while queue:
            distance, current = heapq.heappop(queue)

            if current in settled:
                continue

            if current == end_id:
                break

            settled.add(current)

            for neighbor in self._graph.successors(current):
                if neighbor in settled:
                    continue

                new_distance = distance + self._graph[current][neighbor]["weight"]
                if new_distance < distances[neighbor]:
                    distances[neighbor] = new_distance
                    predecessors[neighbor] = current
                    heapq.heappush(queue, (new_distance, neighbor))

        return distances, predecessors

    @staticmethod
    def _reconstruct_path(
        predecessors: dict[int, int | None], end_id: int
    ) -> list[int]:
        path: list[int] = []
        current: int | None = end_id

        while current is not None:
            path.append(current)
            current = predecessors[current]

        return path[::-1]

    def _resolve_coordinates(self, path: list[int]) -> list[Coordinates]:
        coordinates: list[Coordinates] = []
        for location_id in path:
            if (location := self._locations_by_id.get(location_id)) is None:
                raise RouteConsistencyError(location_id, path)
            coordinates.append(location.coordinates)

        return coordinates

    def find_route(self, start_id: int, end_id: int) -> Route | None:
        """
        Returns the shortest route from `start_id` to `end_id`,
        or None when the end location cannot be reached.
        """

        if start_id not in self._graph:
            raise LocationNotFoundError(start_id)
        if end_id not in self._graph:
            raise LocationNotFoundError(end_id)

        distances, predecessors = self._get_distances_and_predecessors(
            start_id, end_id
        )

        if math.isinf(distances[end_id]):
            return None

        path = self._reconstruct_path(predecessors, end_id)

        return Route(
            path=path,
            distance=distances[end_id],
            coordinates=self._resolve_coordinates(path),
        )
