from pydantic import BaseModel, field_validator
from typing import Dict, List, Optional

class _ExternalRef(BaseModel):
    id: str
    name: str

    @field_validator("id", mode="before")
    @classmethod
    def id_as_str(cls, v):
        return str(v)

class AirportIn(_ExternalRef):
    city: str

class ZoneImportIn(_ExternalRef):
    city: str

class CityLocationIn(_ExternalRef):
    type: Optional[str] = None

class CityBlockIn(BaseModel):
    name: str
    locations: List[CityLocationIn] = []

class InitialData(BaseModel):
    """Legacy catalog dump; ``locations`` is keyed by the old system's city id."""
    airport: List[AirportIn] = []
    zones: List[ZoneImportIn] = []
    locations: Dict[str, CityBlockIn] = {}
