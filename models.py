from pydantic import BaseModel, ConfigDict, Field
from typing import List


class Zone(BaseModel):
    model_config = ConfigDict(frozen=True)

    zone_id: str
    lat: float
    lon: float
    number_of_people: int = Field(gt=0)
    urgency_level: int = Field(ge=1, le=5)  # 5 = most urgent


class Vehicle(BaseModel):
    model_config = ConfigDict(frozen=True)

    vehicle_id: str
    capacity: int = Field(gt=0)
    type: str  # free-form, e.g. "bus", "boat", "helicopter"
    lat: float
    lon: float
    speed: float = Field(gt=0)  # km/h


class Status(BaseModel):
    zone_id: str
    total_evacuated: int = Field(ge=0)
    remaining_people: int = Field(ge=0)


class Assignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    zone_id: str
    vehicle_id: str
    eta: str
    number_of_people: int = Field(gt=0)


class EvacuationUpdate(BaseModel):
    zone_id: str
    vehicle_id: str
    evacuees_moved: int = Field(gt=0)


class Plan(BaseModel):
    assignments: List[Assignment]
