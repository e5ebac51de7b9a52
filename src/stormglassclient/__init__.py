"""
StormGlass API client for marine weather forecasts.
Fetches point forecasts and normalizes them to a single provider reading per field.
"""

__all__ = [
    'StormGlassClient', 'StormGlassSettings', 'ForecastPoint', 'Request',
    'InternalError', 'StormGlassError', 'ErrorKind',
    'points_to_frame', 'detect_missing_hours',
]

from .client import ErrorKind, ForecastPoint, InternalError, StormGlassClient, StormGlassError
from .config import StormGlassSettings
from .enrich import detect_missing_hours, points_to_frame
from .request import Request
