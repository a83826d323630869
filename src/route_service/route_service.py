import logging
import os

import networkx as nx

from location_catalog import Location, LocationCatalog
from navigation_graph import (
    NavigationGraphBuilder,
    Route,
    RouteConsistencyError,
    ShortestPathSolver,
)
from route_service.model import (
    LocationNotFound,
    ResponseGraphEdge,
    ResponseGraphNode,
    RouteFound,
    RouteResult,
    RouteUnreachable,
)

logger = logging.getLogger(__name__)


class RouteService:
    """
    RouteService answers routing requests against a location catalog.

    The navigation graph is rebuilt for every request, so the service holds
    no mutable state and may be shared between concurrent requests as long
    as the catalog is not modified.

    `find_route` reports the outcome as a tagged RouteResult, logging unknown
    locations and unreachable pairs, and lets RouteConsistencyError propagate.
    `get_route` collapses every failure into None.
    """

    DEFAULT_NEIGHBOR_COUNT = int(os.environ.get("ROUTE_NEIGHBOR_COUNT", "3"))

    def __init__(
        self,
        location_catalog: LocationCatalog,
        neighbor_count: int = DEFAULT_NEIGHBOR_COUNT,
    ):
        if neighbor_count <= 0:
            raise ValueError("neighbor_count must be greater than 0.")

        self._location_catalog = location_catalog
        self._neighbor_count = neighbor_count

    def get_all_locations(self) -> list[Location]:
        return list(self._location_catalog.locations)

    def get_location(self, location_id: int) -> Location | None:
        return self._location_catalog.get_by_id(location_id)

    def _build_graph(self) -> "nx.DiGraph[int]":
        return NavigationGraphBuilder(
            self._location_catalog.locations, self._neighbor_count
        ).build_graph()

    def find_route(self, start_id: int, end_id: int) -> RouteResult:
        if (start_location := self.get_location(start_id)) is None:
            logger.warning("Location %s does not exist", start_id)
            return LocationNotFound(location_id=start_id)
        if self.get_location(end_id) is None:
            logger.warning("Location %s does not exist", end_id)
            return LocationNotFound(location_id=end_id)

        if start_id == end_id:
            return RouteFound(route=Route.from_location(start_location))

        solver = ShortestPathSolver(
            self._build_graph(), self._location_catalog.locations
        )
        if (route := solver.find_route(start_id, end_id)) is None:
            logger.info("No route found from %s to %s", start_id, end_id)
            return RouteUnreachable(start_id=start_id, end_id=end_id)

        return RouteFound(route=route)

    def get_route(self, start_id: int, end_id: int) -> Route | None:
        try:
            result = self.find_route(start_id, end_id)
        except RouteConsistencyError as exc:
            logger.exception(
                "Failed to compute route from %s to %s",
                start_id,
                end_id,
                exc_info=exc,
            )
            return None

        match result:
            case RouteFound(route=route):
                return route
            case _:
                return None

    def get_graph(self) -> list[ResponseGraphNode]:
        adjacency = NavigationGraphBuilder.to_adjacency(self._build_graph())

        return [
            ResponseGraphNode(
                id=location.id,
                name=location.name,
                x=location.x,
                y=location.y,
                neighbors=[
                    ResponseGraphEdge(id=edge.to, distance=edge.weight)
                    for edge in adjacency[location.id]
                ],
            )
            for location in self._location_catalog.locations
        ]
