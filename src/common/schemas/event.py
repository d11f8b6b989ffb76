from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class EventPayload(BaseModel):
    """
    Wire shape of a simulated event: the camera's fields plus the detection.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., description="Identifier of the source camera")
    key: str = Field(..., description="Same as id, kept for map marker keys")
    name: str = Field(..., description="Camera display name")
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)
    region: Optional[str] = None
    direction: Optional[str] = None
    event_type: str = Field(..., alias="eventType", description="Category of the event")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Detection confidence")
    detected_at: datetime = Field(..., alias="detectedAt", description="When the event was detected")

class CategoryInfo(BaseModel):
    """
    Legend entry for one event category.
    """
    name: str
    label: str
    color: str
    icon: str

class CategorySummary(BaseModel):
    count: int = Field(..., ge=0)
    avg_confidence: float = Field(..., ge=0.0, le=1.0, alias="avgConfidence")

    model_config = ConfigDict(populate_by_name=True)
