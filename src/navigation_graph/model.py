import math
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from location_catalog import Coordinates, Location


class Edge(BaseModel):
    model_config = ConfigDict(frozen=True)

    to: int
    weight: float = Field(ge=0)


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: list[int] = Field(min_length=1)
    distance: float = Field(ge=0)
    coordinates: list[Coordinates]

    @field_validator("distance", mode="after")
    @classmethod
    def round_half_up_to_2_decimal_places(cls, value: float) -> float:
        return math.floor(value * 100 + 0.5) / 100

    @model_validator(mode="after")
    def validate_coordinates_match_path(self) -> Self:
        if len(self.coordinates) != len(self.path):
            raise ValueError(
                f"Route has {len(self.path)} path elements "
                f"but {len(self.coordinates)} coordinates"
            )
        return self

    @classmethod
    def from_location(cls, location: Location) -> Self:
        return cls(
            path=[location.id],
            distance=0.0,
            coordinates=[location.coordinates],
        )
