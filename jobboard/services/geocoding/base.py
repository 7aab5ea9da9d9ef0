"""Base class for geocoding providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class ZipCode:
    """A zip code resolved to coordinates."""

    zip_code: str
    latitude: float = 0.0
    longitude: float = 0.0
    city: str = ""
    state: str = ""
    distance: float | None = None


class Geocoder(ABC):
    """Abstract base class for zip code and location lookups."""

    @abstractmethod
    async def get_zip_code(self, zipcode: str) -> ZipCode:
        """Resolve a zip code to its coordinates."""
        pass

    @abstractmethod
    async def get_zip_codes_in_radius(self, zipcode: str, radius: float) -> list[ZipCode]:
        """List zip codes within ``radius`` miles of ``zipcode``."""
        pass

    @abstractmethod
    async def autocomplete(self, chars: str) -> list[dict[str, Any]]:
        """Suggest locations matching partial input."""
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None
