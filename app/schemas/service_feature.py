from pydantic import BaseModel, Field
from typing import Optional

class ServiceFeatureIn(BaseModel):
    name_en: str = Field(min_length=1, max_length=255)
    name_es: str = Field(min_length=1, max_length=255)
    description_en: Optional[str] = None
    description_es: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=255)
    active: bool = True
    sort_order: int = Field(default=0, ge=0)

class ServiceFeaturePatch(BaseModel):
    name_en: Optional[str] = Field(default=None, min_length=1, max_length=255)
    name_es: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description_en: Optional[str] = None
    description_es: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=255)
    active: Optional[bool] = None
    sort_order: Optional[int] = Field(default=None, ge=0)
