from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

class RateIn(BaseModel):
    service_type_id: int
    vehicle_type_id: int
    from_zone_id: int
    to_zone_id: int
    from_location_id: Optional[int] = None
    to_location_id: Optional[int] = None
    cost_vehicle_one_way: Decimal = Field(ge=0)
    total_one_way: Decimal = Field(ge=0)
    cost_vehicle_round_trip: Decimal = Field(ge=0)
    total_round_trip: Decimal = Field(ge=0)
    num_vehicles: int = Field(default=1, ge=1)
    available: bool = True
    valid_from: Optional[date] = None
    valid_to: Optional[date] = None
    highlighted: bool = False
    highlight_description: Optional[str] = None
    highlight_badge: Optional[str] = Field(default=None, max_length=255)

class RatePatch(BaseModel):
    service_type_id: Optional[int] = None
    vehicle_type_id: Optional[int] = None
    from_zone_id: Optional[int] = None
    to_zone_id: Optional[int] = None
    from_location_id: Optional[int] = None
    to_location_id: Optional[int] = None
    cost_vehicle_one_way: Optional[Decimal] = Field(default=None, ge=0)
    total_one_way: Optional[Decimal] = Field(default=None, ge=0)
    cost_vehicle_round_trip: Optional[Decimal] = Field(default=None, ge=0)
    total_round_trip: Optional[Decimal] = Field(default=None, ge=0)
    num_vehicles: Optional[int] = Field(default=None, ge=1)
    available: Optional[bool] = None
    valid_from: Optional[date] = None
    valid_to: Optional[date] = None
    highlighted: Optional[bool] = None
    highlight_description: Optional[str] = None
    highlight_badge: Optional[str] = Field(default=None, max_length=255)
