from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from navigation_graph import Route


class RouteFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Default factory hides default value in OpenAPI schema
    status: Literal["found"] = Field(default_factory=lambda: "found")

    route: Route


class LocationNotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["location_not_found"] = Field(
        default_factory=lambda: "location_not_found"
    )

    location_id: int


class RouteUnreachable(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["unreachable"] = Field(default_factory=lambda: "unreachable")

    start_id: int
    end_id: int


RouteResult = Annotated[
    RouteFound | LocationNotFound | RouteUnreachable,
    Field(discriminator="status"),
]


class ResponseGraphEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    distance: float

    @field_validator("distance", mode="after")
    @classmethod
    def round_to_4_decimal_places(cls, value: float) -> float:
        return round(value, 4)


class ResponseGraphNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    x: float
    y: float
    neighbors: list[ResponseGraphEdge]
