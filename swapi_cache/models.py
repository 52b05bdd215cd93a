from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .errors import ServerError


class ResourceKind(str, Enum):
    PEOPLE = "people"
    PLANETS = "planets"
    STARSHIPS = "starships"


class SwapiModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Field that must be present and non-null for a stored payload to count as this shape.
    envelope_field: ClassVar[str | None] = None


class ListItem(SwapiModel):
    uid: str | None = None
    name: str | None = None
    url: str | None = None


class ListResponse(SwapiModel):
    envelope_field: ClassVar[str | None] = "results"

    message: str | None = None
    total_records: int | None = None
    total_pages: int | None = None
    previous: str | None = None
    next: str | None = None
    results: list[ListItem] = Field(default_factory=list)


class PersonProperties(SwapiModel):
    height: str | None = None
    mass: str | None = None
    hair_color: str | None = None
    skin_color: str | None = None
    eye_color: str | None = None
    birth_year: str | None = None
    gender: str | None = None
    created: str | None = None
    edited: str | None = None
    name: str | None = None
    homeworld: str | None = None
    url: str | None = None


class PlanetProperties(SwapiModel):
    diameter: str | None = None
    rotation_period: str | None = None
    orbital_period: str | None = None
    gravity: str | None = None
    population: str | None = None
    climate: str | None = None
    terrain: str | None = None
    surface_water: str | None = None
    created: str | None = None
    edited: str | None = None
    name: str | None = None
    url: str | None = None


class StarshipProperties(SwapiModel):
    model: str | None = None
    starship_class: str | None = None
    manufacturer: str | None = None
    cost_in_credits: str | None = None
    length: str | None = None
    crew: str | None = None
    passengers: str | None = None
    max_atmosphering_speed: str | None = None
    hyperdrive_rating: str | None = None
    MGLT: str | None = None
    cargo_capacity: str | None = None
    consumables: str | None = None
    pilots: list[str] = Field(default_factory=list)
    created: str | None = None
    edited: str | None = None
    name: str | None = None
    url: str | None = None


class ResultBase(SwapiModel):
    description: str | None = None
    id_: str | None = Field(default=None, alias="_id")
    uid: str | None = None
    version: int | None = Field(default=None, alias="__v")


class PersonResult(ResultBase):
    properties: PersonProperties | None = None


class PlanetResult(ResultBase):
    properties: PlanetProperties | None = None


class StarshipResult(ResultBase):
    properties: StarshipProperties | None = None


class PersonResponse(SwapiModel):
    envelope_field: ClassVar[str | None] = "result"

    message: str | None = None
    result: PersonResult | None = None


class PlanetResponse(SwapiModel):
    envelope_field: ClassVar[str | None] = "result"

    message: str | None = None
    result: PlanetResult | None = None


class StarshipResponse(SwapiModel):
    envelope_field: ClassVar[str | None] = "result"

    message: str | None = None
    result: StarshipResult | None = None


DETAIL_MODELS: dict[ResourceKind, type[SwapiModel]] = {
    ResourceKind.PEOPLE: PersonResponse,
    ResourceKind.PLANETS: PlanetResponse,
    ResourceKind.STARSHIPS: StarshipResponse,
}


def detail_model_for(kind: ResourceKind) -> type[SwapiModel]:
    try:
        return DETAIL_MODELS[kind]
    except KeyError:
        raise ValueError(f"No detail model registered for resource kind: {kind}") from None


@dataclass
class ApiResult:
    """Outcome of a single catalog call.

    ``payload`` is set for successful calls; ``error`` carries whatever body
    the remote service sent alongside a non-success status.
    """

    kind: ResourceKind
    status_code: int
    payload: SwapiModel | None = None
    error: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.status_code == 200 and self.payload is not None

    @classmethod
    def success(cls, kind: ResourceKind, payload: SwapiModel) -> ApiResult:
        return cls(kind=kind, status_code=200, payload=payload)

    def raise_for_status(self) -> ApiResult:
        if not self.ok:
            detail = (self.error or {}).get("message") or f"HTTP {self.status_code}"
            raise ServerError(message=f"{self.kind.value}: {detail}", status_code=self.status_code)
        return self
