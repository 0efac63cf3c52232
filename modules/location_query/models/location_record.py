"""LocationRecord Data Model

Pydantic models for administrative-area records read from the location
collection. Records are decoded from store documents and never written back.
"""

from typing import Any, Dict, Tuple

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


class GeoBorder(BaseModel):
    """GeoJSON geometry bounding an administrative area.
    
    Ring closure and winding order are not checked here; the database rejects
    malformed geometry when it is queried.
    
    Attributes:
        type: GeoJSON geometry type tag, e.g. "Polygon" or "MultiPolygon"
        coordinates: Nested (longitude, latitude) tuples, depth set by ``type``
    """
    
    model_config = ConfigDict(frozen=True)
    
    type: str = Field(..., description="GeoJSON geometry type")
    coordinates: Tuple[Any, ...] = Field(..., description="Nested (lon, lat) coordinate tuples")
    
    @field_validator('coordinates', mode='before')
    @classmethod
    def freeze_coordinates(cls, v: Any) -> Any:
        """Convert nested coordinate lists to tuples."""
        return _freeze(v)
    
    def to_shape(self) -> BaseGeometry:
        """Convert the border into a shapely geometry for local processing."""
        return shape(self.model_dump())


class LocationRecord(BaseModel):
    """One administrative unit with its border.
    
    Field names follow Python conventions; the store's ``_id`` key maps to
    ``id``. Hierarchy names are descriptive only.
    """
    
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    id: str = Field(..., alias="_id", description="Unique record identifier")
    province: str = Field(..., description="Province name")
    district: str = Field(..., description="District name")
    sub_district: str = Field(..., description="Sub-district name")
    village: str = Field(..., description="Village name")
    border: GeoBorder = Field(..., description="Area border geometry")
    
    @field_validator('id', mode='before')
    @classmethod
    def stringify_object_id(cls, v: Any) -> Any:
        """Render a BSON ObjectId as its hex string."""
        if isinstance(v, ObjectId):
            return str(v)
        return v
    
    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "LocationRecord":
        """Decode a raw store document.
        
        Raises:
            pydantic.ValidationError: If the document does not match the record shape
        """
        return cls.model_validate(document)
