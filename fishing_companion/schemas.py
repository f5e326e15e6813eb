"""
Record and value types.

JSON uses the camelCase names the browser app stored (``commonName``,
``locationName``); Python code uses snake_case attributes.
"""
from __future__ import annotations

from datetime import date as Date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Trips & locations ----------

class LocationIn(Record):
    name: str
    latitude: float
    longitude: float
    notes: str = ""


class Location(LocationIn):
    id: str


class TripItem(Record):
    id: str
    name: str
    checked: bool = False


class TripIn(Record):
    name: str
    date: Date
    notes: str = ""
    location: Optional[Location] = None


class Trip(TripIn):
    id: str
    checklist: List[TripItem] = Field(default_factory=list)


class ChecklistItemIn(Record):
    name: str


# ---------- Gear ----------

class GearCategory(str, Enum):
    rod = "rod"
    reel = "reel"
    line = "line"
    lure = "lure"
    hook = "hook"
    bait = "bait"
    tackle = "tackle"
    accessory = "accessory"


class GearItemIn(Record):
    name: str
    category: GearCategory
    brand: Optional[str] = None
    model: Optional[str] = None
    specs: Optional[Dict[str, str]] = None
    notes: Optional[str] = None
    last_maintenance: Optional[Date] = None
    maintenance_interval: Optional[int] = None  # days
    quantity: int = Field(default=1, ge=0)


class GearItem(GearItemIn):
    id: str


class GearSetIn(Record):
    name: str
    description: Optional[str] = None
    items: List[str] = Field(default_factory=list)


class GearSet(GearSetIn):
    id: str


class QuantityUpdate(Record):
    quantity: int


class MaintenanceUpdate(Record):
    date: Date


# ---------- Fish & journal ----------

class FishSpeciesIn(Record):
    common_name: str
    scientific_name: str
    description: str = ""
    habitat: str = ""
    seasonality: List[str] = Field(default_factory=list)
    techniques: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None


class FishSpecies(FishSpeciesIn):
    id: str


class CatchEntryIn(Record):
    date: Date
    species: str
    location_name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    length: Optional[float] = None
    weight: Optional[float] = None
    technique: str
    bait: Optional[str] = None
    weather: Optional[str] = None
    water_conditions: Optional[str] = None
    notes: str = ""
    image_url: Optional[str] = None


class CatchEntry(CatchEntryIn):
    id: str


class CatchFilter(Record):
    species: Optional[str] = None
    location: Optional[str] = None
    technique: Optional[str] = None
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None


class CatchStats(Record):
    total_catches: int
    species_count: int
    locations: int
    biggest_catch: Optional[CatchEntry] = None


# ---------- External data (derived, never persisted) ----------

class WeatherObservation(Record):
    date: Optional[str] = None
    temperature: Optional[float] = None  # °F
    wind_speed: float  # mph
    wind_direction: Optional[str] = None
    pressure: Optional[float] = None  # hPa
    humidity: Optional[float] = None  # %
    precipitation: float = 0.0  # mm
    conditions: Optional[str] = None
    icon: Optional[str] = None


class ConditionsReport(Record):
    weather: WeatherObservation
    score: int
    label: str
    summary: str


class SunData(Record):
    sunrise: str
    sunset: str
    moon_phase: float  # 0 new moon, 0.5 full moon


class TideData(Record):
    time: str
    height: float
    type: str  # high | low
