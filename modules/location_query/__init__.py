"""Location Query Module

Typed helpers that run spatial find queries against the collection of
administrative-area records and return decoded ``LocationRecord``s.
"""

from .models import GeoBorder, LocationRecord
from .geo_query import (
    GeoQueryExecutor,
    execute_spatial_query,
    geo_intersects_query,
    geo_within_query,
    geo_near_query,
    geo_near_sphere_query,
    geo_box_query,
    geo_center_query,
    geo_geometry_query,
    geo_max_distance_query,
    geo_min_distance_query,
)

__all__ = [
    # Models
    'GeoBorder',
    'LocationRecord',
    # Execution
    'execute_spatial_query',
    'GeoQueryExecutor',
    # Queries
    'geo_intersects_query',
    'geo_within_query',
    'geo_near_query',
    'geo_near_sphere_query',
    'geo_box_query',
    'geo_center_query',
    'geo_geometry_query',
    'geo_max_distance_query',
    'geo_min_distance_query',
]
