"""Location Query Façade

One function per supported spatial predicate. Each builds its filter with
``query_filters`` and hands it to :func:`execute_spatial_query`; the
``client`` argument is a connected ``MongoClient`` owned by the caller.

All functions return the complete list of matching ``LocationRecord``s or
raise the driver's error. ``geo_near_query`` and ``geo_near_sphere_query``
results are ordered nearest first by the server.
"""

from typing import Any, Dict, List, Optional

from pymongo import MongoClient

from gis_core.config import ConfigLoader, QueryConfig
from ..models import LocationRecord
from . import query_filters
from .query_filters import Position, Ring
from .query_executor import execute_spatial_query


def geo_intersects_query(client: MongoClient, polygon: Ring,
                         config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Records whose border intersects ``polygon``."""
    return execute_spatial_query(client, query_filters.intersects_filter(polygon), config)


def geo_within_query(client: MongoClient, polygon: Ring,
                     config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Records whose border lies wholly within ``polygon``."""
    return execute_spatial_query(client, query_filters.within_filter(polygon), config)


def geo_near_query(client: MongoClient, polygon: Ring, max_distance: float,
                   config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Records within ``max_distance`` meters of ``polygon``, nearest first."""
    return execute_spatial_query(client, query_filters.near_filter(polygon, max_distance), config)


def geo_near_sphere_query(client: MongoClient, polygon: Ring, radius: float,
                          config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Like :func:`geo_near_query` with spherical distances."""
    return execute_spatial_query(client, query_filters.near_sphere_filter(polygon, radius), config)


def geo_box_query(client: MongoClient, lower_left: Position, upper_right: Position,
                  config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Records within the rectangle spanned by two [lon, lat] corners."""
    return execute_spatial_query(client, query_filters.box_filter(lower_left, upper_right), config)


def geo_center_query(client: MongoClient, center: Position, radius: float,
                     config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Records within ``radius`` meters of ``center`` on a spherical Earth."""
    return execute_spatial_query(client, query_filters.center_filter(center, radius), config)


def geo_geometry_query(client: MongoClient, geometry: Dict[str, Any],
                       config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Records within a caller-supplied GeoJSON geometry document."""
    return execute_spatial_query(client, query_filters.geometry_filter(geometry), config)


def geo_max_distance_query(client: MongoClient, point: Position, max_distance: float,
                           config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Records within ``max_distance`` meters of ``point``."""
    return execute_spatial_query(client, query_filters.max_distance_filter(point, max_distance), config)


def geo_min_distance_query(client: MongoClient, point: Position, min_distance: float,
                           config: Optional[QueryConfig] = None) -> List[LocationRecord]:
    """Records at least ``min_distance`` meters from ``point``."""
    return execute_spatial_query(client, query_filters.min_distance_filter(point, min_distance), config)


class GeoQueryExecutor:
    """Binds a client and query settings so callers need not pass them each time.
    
    Stateless apart from the two bound values; safe to share between threads
    as long as the client is.
    """
    
    def __init__(self, client: MongoClient, config: Optional[QueryConfig] = None):
        self.client = client
        self.config = config or QueryConfig()
    
    @classmethod
    def from_config_loader(cls, client: MongoClient, config_loader: ConfigLoader,
                           environment: str = "development") -> "GeoQueryExecutor":
        return cls(client, config_loader.get_query_config(environment))
    
    def intersects(self, polygon: Ring) -> List[LocationRecord]:
        return geo_intersects_query(self.client, polygon, self.config)
    
    def within(self, polygon: Ring) -> List[LocationRecord]:
        return geo_within_query(self.client, polygon, self.config)
    
    def near(self, polygon: Ring, max_distance: float) -> List[LocationRecord]:
        return geo_near_query(self.client, polygon, max_distance, self.config)
    
    def near_sphere(self, polygon: Ring, radius: float) -> List[LocationRecord]:
        return geo_near_sphere_query(self.client, polygon, radius, self.config)
    
    def box(self, lower_left: Position, upper_right: Position) -> List[LocationRecord]:
        return geo_box_query(self.client, lower_left, upper_right, self.config)
    
    def center(self, center: Position, radius: float) -> List[LocationRecord]:
        return geo_center_query(self.client, center, radius, self.config)
    
    def geometry(self, geometry: Dict[str, Any]) -> List[LocationRecord]:
        return geo_geometry_query(self.client, geometry, self.config)
    
    def max_distance(self, point: Position, max_distance: float) -> List[LocationRecord]:
        return geo_max_distance_query(self.client, point, max_distance, self.config)
    
    def min_distance(self, point: Position, min_distance: float) -> List[LocationRecord]:
        return geo_min_distance_query(self.client, point, min_distance, self.config)
