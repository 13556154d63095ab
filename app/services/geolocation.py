import ipaddress

from async_lru import alru_cache
from loguru import logger

from app.core.base_client import BaseClient
from app.core.config import settings
from app.models.quiz import Geography


def is_public_ip(ip: str | None) -> bool:
    if not ip:
        return False
    try:
        return ipaddress.ip_address(ip).is_global
    except ValueError:
        return False


class GeolocationClient(BaseClient):
    """
    Best-effort IP geolocation via ipapi.co (no API key needed).

    Geolocation is non-critical: every failure yields an empty Geography.
    """

    def __init__(
        self,
        base_url: str = settings.GEOLOCATION_BASE_URL,
        timeout: float = settings.GEOLOCATION_TIMEOUT_SECONDS,
    ):
        super().__init__(base_url=base_url, timeout=timeout, max_retries=1, headers={"Accept": "application/json"})

    @alru_cache(maxsize=1000, ttl=settings.GEOLOCATION_CACHE_TTL_SECONDS)
    async def _fetch(self, ip: str) -> Geography:
        # Raises on failure so that failures are never cached
        data = await self.get(f"/{ip}/json/")
        # ipapi.co returns an error field when rate-limited or unavailable
        if not isinstance(data, dict) or data.get("error"):
            raise ValueError(f"geolocation unavailable: {data.get('reason') if isinstance(data, dict) else data}")
        return Geography(city=data.get("city") or None, country=data.get("country_name") or None)

    async def lookup(self, ip: str | None = None) -> Geography:
        # Private and loopback addresses would only locate the server itself
        if not is_public_ip(ip):
            return Geography()
        try:
            return await self._fetch(ip)
        except Exception as e:
            logger.warning(f"Geolocation lookup failed: {e}")
            return Geography()


geolocation_client = GeolocationClient()
