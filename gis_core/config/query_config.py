"""
Query execution settings for the location collection.

Validation model for the ``query`` section of the environment configuration.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DATABASE = "GIS"
DEFAULT_COLLECTION = "location"
DEFAULT_TIMEOUT_SECONDS = 10.0


class QueryConfig(BaseModel):
    """Where location records live and how long a single query may run."""
    
    model_config = ConfigDict(frozen=True, extra="ignore")
    
    database: str = Field(DEFAULT_DATABASE, min_length=1, description="Spatial database name")
    collection: str = Field(DEFAULT_COLLECTION, min_length=1, description="Location records collection")
    timeout_seconds: float = Field(
        DEFAULT_TIMEOUT_SECONDS, gt=0,
        description="Execution budget for one find, from call start to drained cursor"
    )
