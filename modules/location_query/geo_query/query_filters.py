"""Spatial Filter Builders

Pure functions producing the MongoDB filter document for each supported
spatial predicate on the ``border`` field. Nothing here talks to the
database, and no geometry is validated: malformed input is passed through
for the server to reject.
"""

from typing import Any, Dict, List, Sequence

BORDER_FIELD = "border"
EARTH_RADIUS_METERS = 6371000

Position = Sequence[float]
Ring = Sequence[Position]


def polygon_geometry(ring: Ring) -> Dict[str, Any]:
    """Single-ring GeoJSON Polygon; the ring is not checked for closure."""
    return {"type": "Polygon", "coordinates": [ring]}


def point_geometry(point: Position) -> Dict[str, Any]:
    return {"type": "Point", "coordinates": point}


def _border_filter(operator: str, expression: Any) -> Dict[str, Any]:
    return {BORDER_FIELD: {operator: expression}}


def intersects_filter(polygon: Ring) -> Dict[str, Any]:
    """Border intersects the polygon."""
    return _border_filter("$geoIntersects", {"$geometry": polygon_geometry(polygon)})


def within_filter(polygon: Ring) -> Dict[str, Any]:
    """Border lies wholly within the polygon."""
    return _border_filter("$geoWithin", {"$geometry": polygon_geometry(polygon)})


def near_filter(polygon: Ring, max_distance: float) -> Dict[str, Any]:
    """Border within ``max_distance`` meters of the polygon, nearest first."""
    return _border_filter("$near", {
        "$geometry": polygon_geometry(polygon),
        "$maxDistance": max_distance,
    })


def near_sphere_filter(polygon: Ring, radius: float) -> Dict[str, Any]:
    """Spherical variant of :func:`near_filter`."""
    return _border_filter("$nearSphere", {
        "$geometry": polygon_geometry(polygon),
        "$maxDistance": radius,
    })


def box_ring(lower_left: Position, upper_right: Position) -> List[List[float]]:
    """Closed five-point ring for an axis-aligned rectangle.
    
    Order: lower-left, lower-right, upper-right, upper-left, lower-left.
    """
    min_x, min_y = lower_left[0], lower_left[1]
    max_x, max_y = upper_right[0], upper_right[1]
    return [
        [min_x, min_y],
        [max_x, min_y],
        [max_x, max_y],
        [min_x, max_y],
        [min_x, min_y],
    ]


def box_filter(lower_left: Position, upper_right: Position) -> Dict[str, Any]:
    """Border within the rectangle, submitted as a polygon rather than ``$box``."""
    return within_filter(box_ring(lower_left, upper_right))


def angular_radius(radius: float) -> float:
    """Convert a distance in meters to radians on a sphere of Earth's mean radius."""
    return float(radius) / EARTH_RADIUS_METERS


def center_filter(center: Position, radius: float) -> Dict[str, Any]:
    """Border within the circle of ``radius`` meters around ``center``."""
    return _border_filter("$geoWithin", {"$centerSphere": [center, angular_radius(radius)]})


def geometry_filter(geometry: Dict[str, Any]) -> Dict[str, Any]:
    """Border within an arbitrary caller-supplied GeoJSON geometry."""
    return _border_filter("$geoWithin", {"$geometry": geometry})


def max_distance_filter(point: Position, max_distance: float) -> Dict[str, Any]:
    """Border within ``max_distance`` meters of the point."""
    return _border_filter("$near", {
        "$geometry": point_geometry(point),
        "$maxDistance": max_distance,
    })


def min_distance_filter(point: Position, min_distance: float) -> Dict[str, Any]:
    """Border at least ``min_distance`` meters from the point."""
    return _border_filter("$near", {
        "$geometry": point_geometry(point),
        "$minDistance": min_distance,
    })
