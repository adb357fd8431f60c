from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field

LocationType = Literal["A", "H", "B", "P"]

class LocationIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    city_id: int
    zone_id: Optional[int] = None
    type: LocationType
    address: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[Decimal] = Field(default=None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(default=None, ge=-180, le=180)
    active: bool = True

class LocationPatch(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    city_id: Optional[int] = None
    zone_id: Optional[int] = None
    type: Optional[LocationType] = None
    address: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[Decimal] = Field(default=None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(default=None, ge=-180, le=180)
    active: Optional[bool] = None
