import math

import networkx as nx
import pytest

from location_catalog import Location
from navigation_graph import Edge, NavigationGraphBuilder


class TestNavigationGraphBuilder:
    @pytest.mark.parametrize("neighbor_count", [1, 2, 3, 5, 15])
    def test_build_graph_edge_limits(
        self, campus_locations: list[Location], neighbor_count: int
    ) -> None:
        # Act
        graph = NavigationGraphBuilder(campus_locations, neighbor_count).build_graph()

        # Assert
        assert set(graph.nodes) == {location.id for location in campus_locations}
        assert nx.number_of_selfloops(graph) == 0
        for node in graph.nodes:
            assert graph.out_degree(node) == neighbor_count

    def test_build_graph_neighbor_count_larger_than_catalog(
        self, campus_locations: list[Location]
    ) -> None:
        # Act
        graph = NavigationGraphBuilder(campus_locations, 100).build_graph()

        # Assert
        for node in graph.nodes:
            assert graph.out_degree(node) == len(campus_locations) - 1
            assert node not in graph.successors(node)

    def test_build_graph_nearest_neighbors(
        self, campus_navigation_graph: "nx.DiGraph[int]"
    ) -> None:
        # Act
        successors = list(campus_navigation_graph.successors(1))
        weights = [campus_navigation_graph[1][node]["weight"] for node in successors]

        # Assert
        assert successors == [2, 3, 4]
        assert weights == pytest.approx([68.0074, 79.0569, 121.0372], abs=1e-4)
        assert weights == sorted(weights)

    @pytest.mark.parametrize(
        ("source", "destination"),
        [
            pytest.param(16, 11, id="democracy_building_to_first_teaching_building"),
            pytest.param(14, 15, id="dormitory_2_to_dormitory_3"),
            pytest.param(6, 9, id="food_college_to_old_library"),
        ],
    )
    def test_build_graph_edges_are_directed(
        self,
        campus_navigation_graph: "nx.DiGraph[int]",
        source: int,
        destination: int,
    ) -> None:
        # Assert
        assert campus_navigation_graph.has_edge(source, destination)
        assert not campus_navigation_graph.has_edge(destination, source)

    def test_build_graph_equal_distances_keep_catalog_order(self) -> None:
        # Arrange
        locations = [
            Location(id=1, name="center", x=0, y=0),
            Location(id=3, name="east", x=1, y=0),
            Location(id=2, name="north", x=0, y=1),
            Location(id=4, name="west", x=-1, y=0),
        ]

        # Act
        graph = NavigationGraphBuilder(locations, neighbor_count=2).build_graph()

        # Assert
        assert list(graph.successors(1)) == [3, 2]

    @pytest.mark.parametrize(
        ("locations", "expected_nodes"),
        [
            pytest.param([], [], id="empty"),
            pytest.param(
                [Location(id=7, name="single", x=1, y=2)], [7], id="single_location"
            ),
        ],
    )
    def test_build_graph_without_edges(
        self, locations: list[Location], expected_nodes: list[int]
    ) -> None:
        # Act
        graph = NavigationGraphBuilder(locations).build_graph()

        # Assert
        assert list(graph.nodes) == expected_nodes
        assert graph.number_of_edges() == 0

    @pytest.mark.parametrize("neighbor_count", [0, -3])
    def test_incorrect_neighbor_count(
        self, campus_locations: list[Location], neighbor_count: int
    ) -> None:
        # Act
        with pytest.raises(ValueError) as exc_info:
            NavigationGraphBuilder(campus_locations, neighbor_count)

        # Assert
        assert str(exc_info.value) == "neighbor_count must be greater than 0."

    def test_euclidean_distance(self) -> None:
        # Arrange
        source = Location(id=1, name="A", x=1, y=1)
        destination = Location(id=2, name="B", x=4, y=5)

        # Act
        distance = NavigationGraphBuilder.euclidean_distance(source, destination)

        # Assert
        assert distance == 5.0
        assert NavigationGraphBuilder.euclidean_distance(destination, source) == 5.0

    def test_to_adjacency(
        self,
        campus_locations: list[Location],
        campus_navigation_graph: "nx.DiGraph[int]",
    ) -> None:
        # Act
        adjacency = NavigationGraphBuilder.to_adjacency(campus_navigation_graph)

        # Assert
        assert list(adjacency) == [location.id for location in campus_locations]
        assert [edge.to for edge in adjacency[16]] == [11, 7, 13]
        assert adjacency[5][0] == Edge(to=6, weight=35.0)

        locations_by_id = {location.id: location for location in campus_locations}
        for source, edges in adjacency.items():
            for edge in edges:
                assert edge.to != source
                assert math.isclose(
                    edge.weight,
                    NavigationGraphBuilder.euclidean_distance(
                        locations_by_id[source], locations_by_id[edge.to]
                    ),
                )
