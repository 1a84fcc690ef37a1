"""Tests for bootstrap page resolution."""

import asyncio
import json

import httpx
import pytest

from goatherd.core.config import settings
from goatherd.core.errors import BootstrapError
from goatherd.data.store import MemoryBackend
from goatherd.shell import bootstrap
from goatherd.shell.bootstrap import (
    SAVED_URL_KEY,
    ZERO_ADVERTISING_ID,
    AttributionListener,
    BootstrapResolver,
    build_landing_url,
    campaign_to_query,
    fetch_bootstrap,
    tracking_identifiers,
)

BOOTSTRAP_URL = "https://bootstrap.example.com/start"
MARKER = "landing-ok"
LANDING_BODY = "https://landing.example.com/welcome?landing-ok"


@pytest.fixture
def fast_timers(monkeypatch):
    """Shrink the attribution and fallback timers."""
    monkeypatch.setattr(settings, "attribution_timeout", 0.05)
    monkeypatch.setattr(settings, "bootstrap_fallback_delay", 0.2)
    monkeypatch.setattr(settings, "bootstrap_deadline", 2.0)


@pytest.fixture
def resolver():
    return BootstrapResolver(MemoryBackend(), url=BOOTSTRAP_URL, marker=MARKER)


class TestCampaignQuery:
    def test_splits_on_underscore(self):
        assert campaign_to_query("spring_goats_fb") == "&sub1=spring&sub2=goats&sub3=fb"

    def test_empty_campaign(self):
        assert campaign_to_query("") is None
        assert campaign_to_query(None) is None

    def test_skips_empty_segments(self):
        assert campaign_to_query("spring__sale") == "&sub1=spring&sub2=sale"
        assert campaign_to_query("_spring_sale_") == "&sub1=spring&sub2=sale"

    def test_only_underscores(self):
        assert campaign_to_query("___") is None


class TestTrackingIdentifiers:
    def test_consented(self):
        assert tracking_identifiers("AD-1", "install-9", True) == {"idfa": "AD-1", "gaid": "install-9"}

    def test_without_consent_zeroes_advertising_id(self):
        assert tracking_identifiers("AD-1", "install-9", False)["idfa"] == ZERO_ADVERTISING_ID


class TestAttributionListener:
    """Tests for AttributionListener."""

    async def test_conversion_data_before_wait(self):
        listener = AttributionListener()
        listener.on_conversion_data({"campaign": "a_b"})
        assert await listener.wait(1.0) == "&sub1=a&sub2=b"

    async def test_first_delivery_wins(self):
        listener = AttributionListener()
        listener.on_failure(RuntimeError("sdk down"))
        listener.on_app_open_attribution({"campaign": "late_entry"})
        assert listener.delivered
        assert await listener.wait(1.0) is None

    async def test_timer_wins(self):
        listener = AttributionListener()
        assert await listener.wait(0.01) is None
        listener.on_conversion_data({"campaign": "too_late"})
        assert listener.conversion_query is None

    async def test_non_string_campaign_is_ignored(self):
        listener = AttributionListener()
        listener.on_conversion_data({"campaign": 42})
        assert not listener.delivered

    async def test_empty_campaign_counts_as_delivery(self):
        listener = AttributionListener()
        listener.on_conversion_data({"campaign": ""})
        listener.on_conversion_data({"campaign": "second_try"})
        assert listener.delivered
        assert await listener.wait(1.0) is None

    async def test_delivery_while_waiting(self):
        listener = AttributionListener()
        asyncio.get_running_loop().call_later(0.01, listener.on_conversion_data, {"campaign": "x"})
        assert await listener.wait(1.0) == "&sub1=x"


class TestBuildLandingUrl:
    def test_appends_identifiers_and_query(self):
        url = build_landing_url(
            " https://landing.example.com/welcome \n",
            {"idfa": ZERO_ADVERTISING_ID, "gaid": "abc"},
            "&sub1=a",
        )
        assert url == f"https://landing.example.com/welcome?idfa={ZERO_ADVERTISING_ID}&gaid=abc&sub1=a"

    def test_rejects_non_url_body(self):
        assert build_landing_url("<html>landing-ok</html>", {"idfa": "x"}) is None


class TestFetchBootstrap:
    """Tests for fetch_bootstrap."""

    async def test_returns_body_with_marker(self, mock_bootstrap):
        mock_bootstrap.get("/start").mock(return_value=httpx.Response(200, text=LANDING_BODY))
        assert await fetch_bootstrap(BOOTSTRAP_URL, MARKER) == LANDING_BODY

    async def test_missing_marker(self, mock_bootstrap):
        mock_bootstrap.get("/start").mock(return_value=httpx.Response(200, text="https://landing.example.com"))
        with pytest.raises(BootstrapError, match="required code"):
            await fetch_bootstrap(BOOTSTRAP_URL, MARKER)

    async def test_http_error(self, mock_bootstrap):
        mock_bootstrap.get("/start").mock(return_value=httpx.Response(404, text=LANDING_BODY))
        with pytest.raises(BootstrapError, match="404"):
            await fetch_bootstrap(BOOTSTRAP_URL, MARKER)

    async def test_network_error(self, mock_bootstrap):
        mock_bootstrap.get("/start").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(BootstrapError, match="Network error"):
            await fetch_bootstrap(BOOTSTRAP_URL, MARKER)

    async def test_body_not_utf8(self, mock_bootstrap):
        mock_bootstrap.get("/start").mock(return_value=httpx.Response(200, content=b"https://x\xff landing-ok"))
        with pytest.raises(BootstrapError, match="Invalid data"):
            await fetch_bootstrap(BOOTSTRAP_URL, MARKER)


class TestBootstrapResolver:
    """Tests for BootstrapResolver.resolve."""

    async def test_saved_url_skips_network(self, mock_bootstrap, fast_timers):
        backend = MemoryBackend({SAVED_URL_KEY: json.dumps("https://saved.example.com/")})
        route = mock_bootstrap.get("/start")
        resolver = BootstrapResolver(backend, url=BOOTSTRAP_URL, marker=MARKER)

        result = await resolver.resolve(AttributionListener(), {"idfa": "x"})

        assert result == "https://saved.example.com/"
        assert not route.called

    async def test_unconfigured_resolves_to_none(self, fast_timers, monkeypatch):
        monkeypatch.setattr(settings, "bootstrap_url", None)
        resolver = BootstrapResolver(MemoryBackend(), marker=MARKER)
        assert await resolver.resolve(AttributionListener(), {}) is None

    async def test_fetches_and_saves_with_conversion_query(self, resolver, mock_bootstrap, fast_timers):
        mock_bootstrap.get("/start").mock(return_value=httpx.Response(200, text=LANDING_BODY))
        listener = AttributionListener()
        listener.on_conversion_data({"campaign": "spring_sale"})

        result = await resolver.resolve(listener, {"idfa": "AD-1", "gaid": "g-1"})

        assert result == f"{LANDING_BODY}?idfa=AD-1&gaid=g-1&sub1=spring&sub2=sale"
        assert resolver.saved_url() == result

    async def test_fetches_without_attribution(self, resolver, mock_bootstrap, fast_timers):
        route = mock_bootstrap.get("/start").mock(return_value=httpx.Response(200, text=LANDING_BODY))

        result = await resolver.resolve(AttributionListener(), {"idfa": "AD-1"})

        assert route.call_count == 1
        assert result == f"{LANDING_BODY}?idfa=AD-1"

    async def test_failed_fetch_is_not_saved(self, resolver, mock_bootstrap, fast_timers):
        mock_bootstrap.get("/start").mock(return_value=httpx.Response(500))
        assert await resolver.resolve(AttributionListener(), {"idfa": "AD-1"}) is None
        assert resolver.saved_url() is None

    async def test_fallback_timer_beats_slow_attribution(self, resolver, mock_bootstrap, monkeypatch):
        """Verify the fetch starts after the fallback delay without conversion data."""
        monkeypatch.setattr(settings, "attribution_timeout", 5.0)
        monkeypatch.setattr(settings, "bootstrap_fallback_delay", 0.05)
        monkeypatch.setattr(settings, "bootstrap_deadline", 2.0)
        mock_bootstrap.get("/start").mock(return_value=httpx.Response(200, text=LANDING_BODY))
        listener = AttributionListener()
        loop = asyncio.get_running_loop()
        late = loop.call_later(1.0, listener.on_conversion_data, {"campaign": "too_late"})

        started = loop.time()
        result = await resolver.resolve(listener, {"idfa": "AD-1"})

        assert loop.time() - started < 1.0
        assert result == f"{LANDING_BODY}?idfa=AD-1"
        late.cancel()

    async def test_deadline_expires_during_fetch(self, resolver, fast_timers, monkeypatch):
        """Verify a fetch outliving the deadline resolves to None and saves nothing."""
        monkeypatch.setattr(settings, "bootstrap_deadline", 0.05)

        async def slow_fetch(url, marker, timeout=None):
            await asyncio.sleep(1.0)
            return LANDING_BODY

        monkeypatch.setattr(bootstrap, "fetch_bootstrap", slow_fetch)
        listener = AttributionListener()
        listener.on_conversion_data({"campaign": "spring"})

        assert await resolver.resolve(listener, {"idfa": "AD-1"}) is None
        assert resolver.saved_url() is None

    async def test_save_url_keeps_first(self, resolver):
        resolver.save_url("https://first.example.com/")
        resolver.save_url("https://second.example.com/")
        assert resolver.saved_url() == "https://first.example.com/"

    async def test_unreadable_saved_url_is_ignored(self):
        resolver = BootstrapResolver(MemoryBackend({SAVED_URL_KEY: "{broken"}), url=BOOTSTRAP_URL, marker=MARKER)
        assert resolver.saved_url() is None
