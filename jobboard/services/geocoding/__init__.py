"""Geocoding collaborators."""

from jobboard.services.geocoding.base import Geocoder, ZipCode
from jobboard.services.geocoding.zipcode_api import ZipCodeClient

__all__ = ["Geocoder", "ZipCode", "ZipCodeClient"]
