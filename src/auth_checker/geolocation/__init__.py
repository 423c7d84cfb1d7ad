"""IP geolocation lookups for login enrichment."""

from .base import GeolocationLookup, NullGeolocationLookup
from .maxmind import MaxMindGeolocationLookup

__all__ = [
    "GeolocationLookup",
    "MaxMindGeolocationLookup",
    "NullGeolocationLookup",
]
