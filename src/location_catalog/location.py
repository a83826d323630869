from pydantic import BaseModel, ConfigDict


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Location(BaseModel):
    """
    Represents a named point on the campus map.
    Attributes:
        id (int): Unique identifier of the location.
        name (str): Display name of the location.
        x (float): Horizontal map coordinate.
        y (float): Vertical map coordinate.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    x: float
    y: float

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(x=self.x, y=self.y)
