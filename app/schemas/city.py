from pydantic import BaseModel, Field
from typing import Optional

class CityIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    state: str = Field(max_length=255)
    country: str = Field(max_length=255)
    description: Optional[str] = None
    image: Optional[str] = Field(default=None, max_length=500)
    active: bool = True

class CityPatch(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    state: Optional[str] = Field(default=None, max_length=255)
    country: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = Field(default=None, max_length=500)
    active: Optional[bool] = None
