from .model import (
    LocationNotFound,
    ResponseGraphEdge,
    ResponseGraphNode,
    RouteFound,
    RouteResult,
    RouteUnreachable,
)
from .route_service import RouteService

__all__ = [
    "RouteService",
    "RouteResult",
    "RouteFound",
    "LocationNotFound",
    "RouteUnreachable",
    "ResponseGraphNode",
    "ResponseGraphEdge",
]
