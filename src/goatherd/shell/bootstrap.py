"""
Bootstrap page resolution.

Decides which landing URL (if any) the shell should open:

1. A URL saved by an earlier successful run is reused without network access.
2. Otherwise wait for attribution conversion data, racing it against a
   fixed timer; whichever comes first wins and there is no second chance.
3. GET the bootstrap URL. Only a 2xx body containing the marker counts; the
   body is the landing URL, to which the tracking identifiers and the
   conversion query (sub1=..&sub2=..) are appended.
4. The first landing URL produced is saved for next time.

Every failure resolves to None, which the caller shows as a blank screen.
Nothing is retried. Attribution data arrives through AttributionListener;
wiring a vendor SDK to it is out of scope here.
"""

import asyncio
import json
import logging
from urllib.parse import urlencode

import httpx

from goatherd.core.config import settings
from goatherd.core.errors import BootstrapError
from goatherd.data.store import JsonFileBackend, MemoryBackend

logger = logging.getLogger(__name__)

SAVED_URL_KEY = "savedLandingURL"

# Reported when tracking consent is not given
ZERO_ADVERTISING_ID = "00000000-0000-0000-0000-000000000000"


def campaign_to_query(campaign: str | None) -> str | None:
    """Turn "a_b_c" into "&sub1=a&sub2=b&sub3=c", skipping empty segments."""
    if not campaign:
        return None
    parts = [part for part in campaign.split("_") if part]
    if not parts:
        return None
    return "&" + "&".join(f"sub{index}={value}" for index, value in enumerate(parts, start=1))


def tracking_identifiers(advertising_id: str | None, install_id: str | None, authorized: bool) -> dict[str, str]:
    """Identifier query parameters; the advertising id is zeroed without consent."""
    return {
        "idfa": advertising_id if authorized and advertising_id else ZERO_ADVERTISING_ID,
        "gaid": install_id or "",
    }


class AttributionListener:
    """Collects the first attribution callback.

    Deliveries must happen on the event loop thread. Only the first delivery
    counts; later ones are ignored.
    """

    def __init__(self):
        self._delivered = asyncio.Event()
        self.conversion_query: str | None = None

    @property
    def delivered(self) -> bool:
        return self._delivered.is_set()

    def _deliver(self, query: str | None) -> None:
        if self._delivered.is_set():
            return
        self.conversion_query = query
        self._delivered.set()

    def on_conversion_data(self, data: dict) -> None:
        campaign = data.get("campaign")
        if isinstance(campaign, str):
            self._deliver(campaign_to_query(campaign))

    def on_app_open_attribution(self, data: dict) -> None:
        campaign = data.get("campaign")
        if isinstance(campaign, str):
            self._deliver(campaign_to_query(campaign))

    def on_failure(self, error: Exception) -> None:
        logger.info("Attribution failed: %s", error)
        self._deliver(None)

    async def wait(self, timeout: float) -> str | None:
        """Conversion query, or None when the timer fires first."""
        try:
            await asyncio.wait_for(self._delivered.wait(), timeout)
        except TimeoutError:
            logger.info("No conversion data after %.1fs", timeout)
            self._deliver(None)
        return self.conversion_query


def build_landing_url(body: str, identifiers: dict[str, str], conversion_query: str | None = None) -> str | None:
    """Append identifiers and the conversion query to the bootstrap body.

    Returns None if the result is not an absolute http(s) URL.
    """
    candidate = body.strip()
    if identifiers:
        candidate += "?" + urlencode(identifiers)
    if conversion_query:
        candidate += conversion_query

    try:
        url = httpx.URL(candidate)
    except httpx.InvalidURL:
        logger.warning("Failed to create URL from: %s", candidate)
        return None
    if url.scheme not in ("http", "https") or not url.host:
        logger.warning("Failed to create URL from: %s", candidate)
        return None
    return candidate


async def fetch_bootstrap(url: str, marker: str, timeout: float | None = None) -> str:
    """GET the bootstrap URL and return its body.

    Raises:
        BootstrapError: On transport errors, non-2xx status or a body without
            the marker
    """
    if timeout is None:
        timeout = settings.bootstrap_request_timeout

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(url, timeout=timeout)
    except httpx.HTTPError as e:
        raise BootstrapError(f"Network error: {e}") from e

    if not response.is_success:
        raise BootstrapError(f"HTTP error: {response.status_code}")

    try:
        text = response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BootstrapError("Invalid data received") from e

    if marker not in text:
        raise BootstrapError("Response doesn't contain required code")
    return text


class BootstrapResolver:
    def __init__(
        self,
        backend: JsonFileBackend | MemoryBackend | None = None,
        url: str | None = None,
        marker: str | None = None,
    ):
        self.backend = backend if backend is not None else JsonFileBackend()
        self.url = url if url is not None else settings.bootstrap_url
        self.marker = marker if marker is not None else settings.bootstrap_marker

    def saved_url(self) -> str | None:
        blob = self.backend.read(SAVED_URL_KEY)
        if blob is None:
            return None
        try:
            value = json.loads(blob)
        except ValueError:
            logger.warning("Ignoring unreadable saved landing URL")
            return None
        return value if isinstance(value, str) and value else None

    def save_url(self, landing_url: str) -> None:
        """Remember the landing URL unless one is already saved."""
        if self.saved_url() is None:
            self.backend.write(SAVED_URL_KEY, json.dumps(landing_url))

    async def wait_for_conversion(self, listener: AttributionListener) -> str | None:
        """Race the listener against the fallback timer."""
        try:
            return await asyncio.wait_for(
                listener.wait(settings.attribution_timeout),
                settings.bootstrap_fallback_delay,
            )
        except TimeoutError:
            logger.info("Fallback: fetching without conversion data")
            return None

    async def _fetch_landing_url(self, identifiers: dict[str, str], conversion_query: str | None) -> str | None:
        try:
            body = await fetch_bootstrap(self.url, self.marker)
        except BootstrapError as e:
            logger.warning("Bootstrap fetch failed: %s", e)
            return None
        return build_landing_url(body, identifiers, conversion_query)

    async def resolve(self, listener: AttributionListener, identifiers: dict[str, str]) -> str | None:
        """Landing URL to open, or None for the blank screen."""
        saved = self.saved_url()
        if saved:
            return saved

        if not self.url or not self.marker:
            logger.warning("Bootstrap URL or marker not configured")
            return None

        conversion_query = await self.wait_for_conversion(listener)

        try:
            landing_url = await asyncio.wait_for(
                self._fetch_landing_url(identifiers, conversion_query),
                settings.bootstrap_deadline,
            )
        except TimeoutError:
            logger.warning("Timeout: bootstrap fetch took too long")
            return None

        if landing_url:
            self.save_url(landing_url)
        return landing_url
