import logging
import os
from collections import Counter
from functools import cached_property
from pathlib import Path
from typing import ClassVar, Self

from pydantic import BaseModel, Field, ValidationError, field_validator

from location_catalog.location import Location

logger = logging.getLogger(__name__)


class LocationCatalog(BaseModel):
    DEFAULT_PATH: ClassVar[Path] = Path(
        os.environ.get("LOCATION_CATALOG_PATH", "./config/locations.json")
    )

    name: str
    locations: list[Location] = Field(min_length=1)

    @field_validator("locations", mode="after")
    @classmethod
    def validate_unique_ids(cls, value: list[Location]) -> list[Location]:
        id_counts = Counter(location.id for location in value)
        if duplicated := sorted(
            location_id for location_id, count in id_counts.items() if count > 1
        ):
            raise ValueError(f"Duplicated location IDs: {duplicated}")

        return value

    @classmethod
    def from_path(cls, path: Path) -> Self:
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            logger.exception(f"Invalid location catalog file: {path}", exc_info=exc)
            raise

    @classmethod
    def get_default(cls) -> Self:
        return cls.from_path(cls.DEFAULT_PATH)

    @cached_property
    def _locations_by_id(self) -> dict[int, Location]:
        return {location.id: location for location in self.locations}

    def get_by_id(self, location_id: int) -> Location | None:
        return self._locations_by_id.get(location_id)
