from pathlib import Path

import networkx as nx
import pytest

from location_catalog import Location, LocationCatalog
from navigation_graph import NavigationGraphBuilder


@pytest.fixture
def campus_location_catalog() -> LocationCatalog:
    return LocationCatalog.from_path(
        Path.cwd() / "tests" / "assets" / "campus_locations.json"
    )


@pytest.fixture
def campus_locations(campus_location_catalog: LocationCatalog) -> list[Location]:
    return campus_location_catalog.locations


@pytest.fixture
def campus_navigation_graph(campus_locations: list[Location]) -> "nx.DiGraph[int]":
    return NavigationGraphBuilder(campus_locations, neighbor_count=3).build_graph()
