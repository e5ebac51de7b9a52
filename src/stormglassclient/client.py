from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, TypedDict

from .config import StormGlassSettings
from .request import Request

StormGlassSource = Dict[str, float]

# provider (forecast model) whose reading is kept for every field
STORMGLASS_API_SOURCE = 'noaa'

# API field name -> ForecastPoint attribute
FIELD_MAP: Dict[str, str] = {
    'swellDirection': 'swell_direction',
    'swellHeight': 'swell_height',
    'swellPeriod': 'swell_period',
    'waveDirection': 'wave_direction',
    'waveHeight': 'wave_height',
    'windDirection': 'wind_direction',
    'windSpeed': 'wind_speed',
}

STORMGLASS_API_PARAMS = ','.join(FIELD_MAP)


class StormGlassPoint(TypedDict):
    time: str
    swellDirection: StormGlassSource
    swellHeight: StormGlassSource
    swellPeriod: StormGlassSource
    waveDirection: StormGlassSource
    waveHeight: StormGlassSource
    windDirection: StormGlassSource
    windSpeed: StormGlassSource


class StormGlassForecastResponse(TypedDict):
    hours: List[StormGlassPoint]


@dataclass
class ForecastPoint:
    """A single forecast hour with one reading per field."""
    time: str
    swell_direction: float
    swell_height: float
    swell_period: float
    wave_direction: float
    wave_height: float
    wind_direction: float
    wind_speed: float


class InternalError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ErrorKind(enum.Enum):
    CLIENT_REQUEST = 'Unexpected error when trying to communicate to StormGlass'
    CLIENT_RESPONSE = 'Unexpected error returned by the StormGlass service'


class StormGlassError(InternalError):
    """Raised by StormGlassClient; ``kind`` tells request from response failures."""

    def __init__(self, kind: ErrorKind, detail: str):
        super().__init__(f"{kind.value}: {detail}")
        self.kind = kind
        self.detail = detail

    @classmethod
    def request_error(cls, detail: str) -> 'StormGlassError':
        return cls(ErrorKind.CLIENT_REQUEST, detail)

    @classmethod
    def response_error(cls, detail: str) -> 'StormGlassError':
        return cls(ErrorKind.CLIENT_RESPONSE, detail)


class StormGlassClient:
    """
    Client for the StormGlass weather point API.
    Returns hourly marine forecasts reduced to the NOAA reading of each field.
    """

    def __init__(self, settings: StormGlassSettings, request: Optional[Request] = None):
        self.settings = settings
        self.request = request or Request(timeout=settings.timeout)
        self._log = logging.getLogger(__name__)

    @staticmethod
    def _fmt(value: float) -> str:
        """Format a coordinate without a trailing .0 or exponent (10.0 -> 10, 1e-05 -> 0.00001)."""
        if float(value).is_integer():
            return str(int(value))
        return f"{Decimal(repr(float(value))):f}"

    def _url(self, lat: float, lng: float) -> str:
        return (
            f"{self.settings.api_url}/weather/point?params={STORMGLASS_API_PARAMS}"
            f"&source={STORMGLASS_API_SOURCE}&lat={self._fmt(lat)}&lng={self._fmt(lng)}"
        )

    async def fetch_points(self, lat: float, lng: float) -> List[ForecastPoint]:
        """
        Fetch the forecast for a coordinate.

        Args:
            lat: latitude, passed through unvalidated
            lng: longitude, passed through unvalidated

        Returns:
            Normalized forecast points in API order; incomplete hours are dropped

        Raises:
            StormGlassError: CLIENT_RESPONSE if the service answered with an error
                status, CLIENT_REQUEST for any other failure
        """
        url = self._url(lat, lng)
        self._log.debug("Fetching StormGlass forecast for lat=%s lng=%s", lat, lng)
        try:
            response = await self.request.get(
                url, headers={'Authorization': f"{self.settings.api_token}"}
            )
            points = self._normalized_response(response.json())
        except Exception as err:  # noqa: BLE001
            if Request.is_response_error(err):
                status = err.response.status_code
                body = self._response_body(err.response)
                self._log.warning("StormGlass responded with status %s", status)
                raise StormGlassError.response_error(
                    f"Error: {json.dumps(body)} Code: {status}"
                ) from err
            self._log.warning("StormGlass request failed: %s", err)
            raise StormGlassError.request_error(str(err)) from err
        return points

    @staticmethod
    def _response_body(response: Any) -> Any:
        try:
            return response.json()
        except ValueError:
            return getattr(response, 'text', None)

    def _normalized_response(self, payload: StormGlassForecastResponse) -> List[ForecastPoint]:
        hours = payload['hours']
        points = [
            ForecastPoint(
                time=point['time'],
                **{attr: point[field][STORMGLASS_API_SOURCE] for field, attr in FIELD_MAP.items()},
            )
            for point in hours
            if self._is_valid_point(point)
        ]
        self._log.debug("Normalized %s of %s forecast hours", len(points), len(hours))
        return points

    @staticmethod
    def _is_valid_point(point: Dict[str, Any]) -> bool:
        # zero readings are falsy and drop the point, same as a missing one
        if not point.get('time'):
            return False
        for field in FIELD_MAP:
            source = point.get(field)
            if not isinstance(source, Mapping) or not source.get(STORMGLASS_API_SOURCE):
                return False
        return True

    async def aclose(self) -> None:
        await self.request.aclose()

    async def __aenter__(self) -> 'StormGlassClient':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
