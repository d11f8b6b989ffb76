from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class CameraRecord(BaseModel):
    """
    Shape of a single camera entry after normalization of the camera list.
    Unknown fields are kept as extras and travel with the camera.
    """
    model_config = ConfigDict(extra="allow")

    key: str = Field(..., min_length=1, description="Unique identifier for the camera")
    name: Optional[str] = Field(None, description="Display name")
    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude")
    region: Optional[str] = Field(None, description="Region the camera belongs to")
    direction: Optional[str] = Field(None, description="Direction of travel monitored")

    @field_validator('key', mode='before')
    def key_must_be_text(cls, v):
        if v is None or isinstance(v, bool):
            raise ValueError('key is required')
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator('name', 'region', 'direction', mode='before')
    def metadata_as_text(cls, v: Any):
        # Some feeds nest these as {"name": ...}
        if isinstance(v, dict):
            v = v.get('name')
        if v is None:
            return None
        return str(v)
