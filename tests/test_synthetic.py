"""Tests for fxpulse.market.synthetic — fake market snapshots."""

import random
from datetime import datetime, timezone

import pytest

from fxpulse.market.base import MarketDataSource, UnsupportedPairError
from fxpulse.market.synthetic import PAIR_PROFILES, SyntheticMarketData
from fxpulse.signals.models import CURRENCY_PAIRS

_NOW = datetime(2025, 3, 3, 9, 30, tzinfo=timezone.utc)


class _ScriptedRandom(random.Random):
    def __init__(self, *values: float) -> None:
        super().__init__(0)
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


def test_every_pair_has_a_profile():
    assert set(PAIR_PROFILES) == set(CURRENCY_PAIRS)
    assert PAIR_PROFILES["EUR/JPY"].base_price == 165.50
    assert PAIR_PROFILES["EUR/USD"].base_price == 1.0850


def test_scripted_draws():
    source = SyntheticMarketData(rng=_ScriptedRandom(1.0, 0.25, 0.5), clock=lambda: _NOW)
    market = source.generate("EUR/JPY")
    assert market.pair == "EUR/JPY"
    assert market.current_price == pytest.approx(165.75)
    assert market.change_24h == pytest.approx(-0.5)
    assert market.volume == 1_000_000
    assert market.bid == pytest.approx(165.749)
    assert market.ask == pytest.approx(165.751)
    assert market.timestamp == _NOW


def test_ranges_hold():
    source = SyntheticMarketData(rng=random.Random(21))
    for _ in range(300):
        market = source.generate("EUR/USD")
        assert 1.0840 <= market.current_price < 1.0860
        assert -1.0 <= market.change_24h < 1.0
        assert 500_000 <= market.volume < 1_500_000
        assert market.bid < market.current_price < market.ask


def test_seeded_sources_agree():
    a = SyntheticMarketData(rng=random.Random(4), clock=lambda: _NOW)
    b = SyntheticMarketData(rng=random.Random(4), clock=lambda: _NOW)
    assert a.generate("EUR/USD") == b.generate("EUR/USD")


def test_unknown_pair():
    with pytest.raises(UnsupportedPairError):
        SyntheticMarketData().generate("AUD/NZD")


@pytest.mark.asyncio
async def test_async_source_protocol():
    source = SyntheticMarketData(rng=random.Random(1))
    assert isinstance(source, MarketDataSource)
    market = await source.get_market_data("EUR/USD")
    assert market.pair == "EUR/USD"
