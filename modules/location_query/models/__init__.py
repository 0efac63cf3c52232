"""Data models for the Location Query module."""

from .location_record import GeoBorder, LocationRecord

__all__ = ['GeoBorder', 'LocationRecord']
