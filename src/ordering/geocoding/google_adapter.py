"""Google Maps Geocoding API adapter."""

import requests

from ordering.geocoding.port import GeocodeResult, Geocoder, build_query
from ordering.utils.logging import get_logger

logger = get_logger(__name__)

GEOCODING_API_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleGeocoder(Geocoder):
    """Resolves addresses with the Google Maps Geocoding API.

    Every failure mode (missing key, blank query, HTTP error, non-``OK`` API
    status, empty results, network error or timeout) is logged and yields
    ``None``.
    """

    def __init__(self, api_key: str | None, timeout: float = 5.0, session: requests.Session | None = None) -> None:
        self.api_key = api_key or ""
        self.timeout = timeout
        self.session = session or requests.Session()

    def resolve(self, city: str, country: str) -> GeocodeResult | None:
        if not self.api_key:
            logger.warning("geocoding_skipped", reason="GOOGLE_MAPS_API_KEY is not configured")
            return None

        address = build_query(city, country)
        if not address:
            logger.warning("geocoding_skipped", reason="city and country are missing")
            return None

        logger.info("geocoding_address", address=address)
        try:
            response = self.session.get(
                GEOCODING_API_URL,
                params={"address": address, "key": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("geocoding_failed", address=address, error=str(exc))
            return None

        results = data.get("results") or []
        if data.get("status") != "OK" or not results:
            logger.warning("geocoding_no_result", address=address, api_status=data.get("status"))
            return None

        try:
            first = results[0]
            location = first["geometry"]["location"]
            result = GeocodeResult(
                latitude=float(location["lat"]),
                longitude=float(location["lng"]),
                formatted_address=first.get("formatted_address", address),
            )
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("geocoding_malformed_response", address=address, error=str(exc))
            return None

        logger.info(
            "geocoding_succeeded",
            address=address,
            latitude=result.latitude,
            longitude=result.longitude,
        )
        return result
