"""Spatial query building and execution for the location collection."""

from .query_filters import (
    BORDER_FIELD,
    EARTH_RADIUS_METERS,
    angular_radius,
    box_ring,
)
from .query_executor import execute_spatial_query
from .geo_queries import (
    GeoQueryExecutor,
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
    'BORDER_FIELD',
    'EARTH_RADIUS_METERS',
    'angular_radius',
    'box_ring',
    'execute_spatial_query',
    'GeoQueryExecutor',
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
