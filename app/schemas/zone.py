from pydantic import BaseModel, Field
from typing import Optional

class ZoneIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    city_id: int
    description: Optional[str] = None
    active: bool = True

class ZonePatch(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    city_id: Optional[int] = None
    description: Optional[str] = None
    active: Optional[bool] = None
