"""
Shared fixtures: a conversion service wired to fakes, never the network.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from app.core.errors import UpstreamUnavailable
from app.domain.services.conversion_service import ConversionService
from app.domain.services.market_commentary import MarketCommentaryProvider
from app.infra.cache.rate_cache import RateCache
from app.main import create_app


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeRateProvider:
    """Devuelve tasas fijas por par y cuenta las llamadas."""

    source = "Frankfurter.app"

    def __init__(self, rates=None, error: UpstreamUnavailable = None):
        self.rates = rates or {}
        self.error = error
        self.calls = []

    def fetch_rate(self, base, target):
        self.calls.append((base, target))
        if self.error is not None:
            raise self.error
        return self.rates[(base, target)]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rate_provider():
    return FakeRateProvider(rates={
        ("USD", "EUR"): 0.92,
        ("EUR", "USD"): 1.0869565,
        ("GBP", "JPY"): 190.123456,
    })


@pytest.fixture
def gemini():
    client = Mock()
    client.generate.return_value = "Gemini market analysis."
    return client


@pytest.fixture
def service(rate_provider, gemini, clock):
    return ConversionService(
        rate_provider=rate_provider,
        commentary=MarketCommentaryProvider(client=gemini),
        cache=RateCache(ttl_seconds=600, clock=clock),
    )


@pytest.fixture
def client(service):
    with TestClient(create_app(conversion_service=service)) as test_client:
        yield test_client
