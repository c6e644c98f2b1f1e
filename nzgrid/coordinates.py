"""
Representation of a specific point on earth, in decimal degrees
"""

__all__ = ['Coordinate']

import math
from typing import Optional, Tuple

from nzgrid.nztm import NZTMCoordinate, geodetic_to_nztm, nztm_to_geodetic
from nzgrid.validation import resolve_validation
from nzgrid.utils.functions import round_half_up


class Coordinate:
    """Representation of a coordinate on the globe (i.e., a lon/lat pair) in degrees"""

    def __init__(
        self,
        longitude: float,
        latitude: float,
        _bounded: bool = True,
    ):
        lon, lat = float(longitude), float(latitude)
        self._crossed_pole = False
        if _bounded:
            while not -90 <= lat <= 90:
                # Crosses one of the poles
                self._crossed_pole = True
                lat = 90 - (lat - 90) if lat > 90 else -90 - (lat + 90)
                lon = lon + 180 if lon < 0 else lon - 180

            while not -180 <= lon <= 180:
                # Crosses the antimeridian
                lon = lon - 360 if lon > 180 else lon + 360

        # Longitudes are bounded to [-180, 180)
        if lon == 180:
            lon = -180

        self.longitude = lon
        self.latitude = lat

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @classmethod
    def from_dms(cls, lon: Tuple[int, int, float, str], lat: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lon, lat) pair.

        The quadrant value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude)

        Args:
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return Coordinate(convert(lon), convert(lat))

    @classmethod
    def from_nztm(cls, northing: float, easting: float, validate: Optional[bool] = None):
        """
        Creates a Coordinate from a NZTM northing/easting pair.

        Args:
            northing:
                NZTM northing, in meters

            easting:
                NZTM easting, in meters

            validate:
                (Default None) Passed through to nzgrid.nztm.nztm_to_geodetic

        Returns:
            Coordinate
        """
        lat, lon = nztm_to_geodetic(northing, easting, validate=validate)
        return Coordinate(math.degrees(lon), math.degrees(lat))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert a value (latitude or longitude) in decimal degrees to a tuple of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted value as (degrees, minutes, seconds, hemisphere)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude
        return self.longitude, self.latitude

    def to_nztm(self, validate: Optional[bool] = None) -> NZTMCoordinate:
        """
        Convert this coordinate to NZTM.

        Args:
            validate:
                (Default None) Passed through to nzgrid.nztm.geodetic_to_nztm. When
                enabled, a coordinate created from a latitude beyond a pole is rejected
                rather than projected from its folded position.

        Returns:
            NZTMCoordinate of (northing, easting) in meters

        Raises:
            ValueError: if validation is enabled and the latitude crossed a pole
        """
        if resolve_validation(validate) and self._crossed_pole:
            raise ValueError(
                f'Latitude was outside [-90, 90] and was folded across a pole: {self!r}'
            )

        lat, lon = self.to_radians()
        return geodetic_to_nztm(lat, lon, validate=validate)

    def to_radians(self) -> Tuple[float, float]:
        """Returns (latitude, longitude) in radians"""
        return math.radians(self.latitude), math.radians(self.longitude)
