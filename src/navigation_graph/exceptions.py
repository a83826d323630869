class LocationNotFoundError(Exception):
    def __init__(self, location_id: int):
        self.location_id = location_id
        super().__init__(f"Location with id {location_id} not found in the graph.")


class RouteConsistencyError(Exception):
    """
    Exception raised when a reconstructed path references a location
    which is absent from the location catalog. This means the graph and
    the catalog passed to the solver do not describe the same map.
    """

    def __init__(self, location_id: int, path: list[int]):
        self.location_id = location_id
        self.path = path
        super().__init__(
            f"Location {location_id} on path {path} is missing from the catalog."
        )
