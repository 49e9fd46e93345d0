# country_info/models.py: response payloads and the uniform envelope
from __future__ import annotations

from typing import Dict, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

ONLINE = "Online"
OFFLINE = "Offline"


class YearValue(BaseModel):
    """One observation of a population series. Built from upstream data only."""

    model_config = ConfigDict(frozen=True)

    year: int
    value: int


class CountryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    continents: List[str] = Field(default_factory=list)
    population: int
    languages: Dict[str, str] = Field(default_factory=dict)
    borders: List[str] = Field(default_factory=list)
    flag: str = ""
    capital: str = Field("", description="First capital listed upstream; empty when none is listed")
    cities: List[str] = Field(default_factory=list)


class PopulationInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: List[YearValue] = Field(default_factory=list)
    mean: int = 0


class APIStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    countriesnowapi: Literal["Online", "Offline"]
    restcountriesapi: Literal["Online", "Offline"]
    version: str
    uptime: int = Field(..., ge=0, description="Whole seconds since process start")


class EndpointHint(BaseModel):
    endpoint: str
    description: str
    example: str


class Envelope(BaseModel, Generic[T]):
    """
    Uniform `{error, message, data}` wrapper. The payload type is fixed per
    operation: Envelope[CountryInfo], Envelope[PopulationInfo],
    Envelope[APIStatus] or Envelope[List[EndpointHint]].
    """

    error: bool = False
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(cls, message: str, data: T) -> "Envelope[T]":
        return cls(error=False, message=message, data=data)

    @classmethod
    def fail(cls, message: str) -> "Envelope[T]":
        return cls(error=True, message=message, data=None)
