"""Pydantic models of the on-disk network JSON format.

The file layout is::

    {
      "networkName": "...",
      "routes": [
        {"name": "...", "color": "...",
         "stops": [{"stop": 1, "stationName": "...", "stationID": 1,
                    "distanceToNext": 25, "distanceToPrev": null}, ...]}
      ]
    }

Distances may be written as numeric strings ("25"); they are coerced.
Booleans are rejected.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.models import RailwayNetwork, Route, Stop


class StopDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    number: int = Field(alias="stop", ge=1)
    station_name: str = Field(alias="stationName", min_length=1)
    station_id: int = Field(alias="stationID")
    distance_to_next: Optional[float] = Field(default=None, alias="distanceToNext")
    distance_to_prev: Optional[float] = Field(default=None, alias="distanceToPrev")

    @field_validator("distance_to_next", "distance_to_prev", mode="before")
    @classmethod
    def reject_boolean_distance(cls, value):
        # lax float parsing would read true as 1.0
        if isinstance(value, bool):
            raise ValueError("distance must be a number, not a boolean")
        return value

    def to_domain(self) -> Stop:
        return Stop(
            number=self.number,
            station_name=self.station_name,
            station_id=self.station_id,
            distance_to_next=self.distance_to_next,
            distance_to_prev=self.distance_to_prev,
        )


class RouteDocument(BaseModel):
    name: str = Field(min_length=1)
    color: str = ""
    stops: List[StopDocument] = Field(default_factory=list)

    def to_domain(self) -> Route:
        return Route(
            name=self.name,
            stops=tuple(stop.to_domain() for stop in self.stops),
            color=self.color,
        )


class NetworkDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    network_name: str = Field(alias="networkName")
    routes: List[RouteDocument] = Field(default_factory=list)

    def to_domain(self) -> RailwayNetwork:
        return RailwayNetwork(
            network_name=self.network_name,
            routes=tuple(route.to_domain() for route in self.routes),
        )
