from pydantic import BaseModel, Field
from typing import List, Optional

class VehicleTypeIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    code: str = Field(min_length=1, max_length=10)
    image: Optional[str] = Field(default=None, max_length=255)
    max_units: int = Field(ge=1)
    max_pax: int = Field(ge=1)
    travel_time: Optional[str] = Field(default=None, max_length=255)
    video_url: Optional[str] = Field(default=None, max_length=500)
    frame: Optional[str] = Field(default=None, max_length=255)
    active: bool = True
    service_feature_ids: List[int] = []

class VehicleTypePatch(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    code: Optional[str] = Field(default=None, min_length=1, max_length=10)
    image: Optional[str] = Field(default=None, max_length=255)
    max_units: Optional[int] = Field(default=None, ge=1)
    max_pax: Optional[int] = Field(default=None, ge=1)
    travel_time: Optional[str] = Field(default=None, max_length=255)
    video_url: Optional[str] = Field(default=None, max_length=500)
    frame: Optional[str] = Field(default=None, max_length=255)
    active: Optional[bool] = None
    # None leaves the feature set alone; [] clears it
    service_feature_ids: Optional[List[int]] = None
