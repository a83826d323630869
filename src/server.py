import logging
import os

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.gzip import GZipMiddleware
from pydantic import ValidationError

from location_catalog import Location, LocationCatalog
from navigation_graph import Route, RouteConsistencyError
from route_service import (
    LocationNotFound,
    ResponseGraphNode,
    RouteFound,
    RouteService,
    RouteUnreachable,
)

app = FastAPI()
app.add_middleware(GZipMiddleware)

logger = logging.getLogger(__name__)


def _get_location_catalog() -> LocationCatalog:
    try:
        return LocationCatalog.get_default()
    except ValidationError:
        raise HTTPException(500, "Invalid location catalog")
    except OSError as exc:
        logger.exception(
            "Failed to read location catalog %s",
            LocationCatalog.DEFAULT_PATH,
            exc_info=exc,
        )
        raise HTTPException(500, "Invalid location catalog")


def _get_route_service(
    location_catalog: LocationCatalog = Depends(_get_location_catalog),
    neighbor_count: int = Query(RouteService.DEFAULT_NEIGHBOR_COUNT, ge=1),
) -> RouteService:
    return RouteService(location_catalog, neighbor_count)


@app.get("/locations")
def locations(
    location_catalog: LocationCatalog = Depends(_get_location_catalog),
) -> list[Location]:
    """
    Returns all locations of the campus map.
    """
    return location_catalog.locations


@app.get("/locations/{location_id}")
def get_location(
    location_id: int,
    location_catalog: LocationCatalog = Depends(_get_location_catalog),
) -> Location:
    if (location := location_catalog.get_by_id(location_id)) is None:
        raise HTTPException(404, f"Location {location_id} not found")

    return location


@app.get("/route")
def get_route(
    start_id: int,
    end_id: int,
    route_service: RouteService = Depends(_get_route_service),
) -> Route:
    """
    Returns the shortest walking route between two locations.

    - Responds with 404 when either location does not exist.
    - Responds with 404 when the end location is unreachable from the start
    location in the navigation graph.
    - `neighbor_count` controls how many nearest neighbors every location
    is connected to.
    """
    try:
        result = route_service.find_route(start_id, end_id)
    except RouteConsistencyError as exc:
        logger.exception(
            "Failed to compute route from %s to %s",
            start_id,
            end_id,
            exc_info=exc,
        )
        raise HTTPException(500, "Route computation failed")

    match result:
        case RouteFound(route=route):
            return route
        case LocationNotFound(location_id=location_id):
            raise HTTPException(404, f"Location {location_id} not found")
        case RouteUnreachable():
            raise HTTPException(
                404, f"No route found between {start_id} and {end_id}"
            )


@app.get("/graph")
def get_graph(
    route_service: RouteService = Depends(_get_route_service),
) -> list[ResponseGraphNode]:
    """
    Returns the navigation graph, every location with its nearest neighbors.
    """
    return route_service.get_graph()


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.environ.get("APP_HOST", "127.0.0.1"),
        port=int(os.environ.get("APP_PORT", 8000)),
    )
