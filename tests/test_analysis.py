"""Tests for fxpulse.signals.analysis — end-to-end signal computation.

Seeded or scripted RNGs and a fixed clock make every result reproducible.
"""

import random
from datetime import datetime, timezone

import pytest

from fxpulse.signals.analysis import compute_signals
from fxpulse.signals.models import (
    BUY,
    HOLD,
    SELL,
    STRATEGY_KEYS,
    AnalysisResult,
    MarketData,
)
from fxpulse.signals.rules import EDGE_RULES

_NOW = datetime(2025, 3, 3, 12, 0, 5, tzinfo=timezone.utc)


def _clock() -> datetime:
    return _NOW


class _ScriptedRandom(random.Random):
    def __init__(self, *values: float) -> None:
        super().__init__(0)
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


def _market(change: float, pair: str = "EUR/USD") -> MarketData:
    return MarketData(
        pair=pair,
        current_price=1.0850,
        change_24h=change,
        timestamp=datetime(2025, 3, 3, 12, 0, tzinfo=timezone.utc),
        volume=750_000,
        bid=1.0849,
        ask=1.0851,
    )


class TestComputeSignals:
    def test_same_seed_same_result(self):
        market = _market(0.7)
        a = compute_signals(market, rng=random.Random(1234), clock=_clock)
        b = compute_signals(market, rng=random.Random(1234), clock=_clock)
        assert a == b
        assert a.to_dict() == b.to_dict()

    def test_strategies_view_matches_signals(self):
        result = compute_signals(_market(-0.3), rng=random.Random(5), clock=_clock)
        assert len(result.signals) == 5
        assert list(result.strategies) == list(STRATEGY_KEYS)
        for i, key in enumerate(STRATEGY_KEYS):
            assert result.strategies[key] is result.signals[i]

    def test_strong_rally_scenario(self):
        # Technical SELL (0.2), confidence 80, move 0.6; sentiment neutral
        rng = _ScriptedRandom(0.2, 0.5, 0.5, 0.5)
        result = compute_signals(_market(2.0), rng=rng, clock=_clock)

        trend = result.strategies["trend"]
        assert trend.direction == BUY
        assert trend.confidence == 95.0

        reversal = result.strategies["reversal"]
        assert reversal.direction == SELL
        assert reversal.confidence == 85.0

        assert result.strategies["technical"].direction == SELL
        assert result.strategies["sentiment"].direction == HOLD
        assert result.strategies["volatility"].direction == SELL

        overall = result.overall_recommendation
        assert overall.direction == SELL
        assert overall.reasoning.startswith("1 signaux d'achat, 3 signaux de vente")

    def test_flat_market_trend_sells(self):
        result = compute_signals(_market(0.0), rng=random.Random(3), clock=_clock)
        assert result.strategies["trend"].direction == SELL

    def test_edge_rules(self):
        rng = _ScriptedRandom(0.9, 0.5, 0.5, 0.9)
        result = compute_signals(_market(1.2), rules=EDGE_RULES, rng=rng, clock=_clock)
        assert result.strategies["reversal"].direction == SELL
        assert result.strategies["volatility"].direction == SELL
        assert result.strategies["trend"].strategy == "Analyse de Tendance"
        # trend, technical, sentiment BUY vs reversal, volatility SELL
        assert result.overall_recommendation.direction == BUY

    def test_overall_confidence_within_range(self):
        rng = random.Random(99)
        for i in range(200):
            change = (i - 100) / 40
            result = compute_signals(_market(change), rng=rng, clock=_clock)
            confidences = [s.confidence for s in result.signals]
            assert (
                min(confidences)
                <= result.overall_recommendation.confidence
                <= max(confidences)
            )

    def test_analysis_time_from_clock(self):
        result = compute_signals(_market(0.1), rng=random.Random(0), clock=_clock)
        assert result.analysis_time == _NOW


class TestWireShape:
    def test_to_dict_keys_and_iso_timestamps(self):
        result = compute_signals(_market(0.5), rng=random.Random(8), clock=_clock)
        data = result.to_dict()
        assert set(data) == {
            "pair",
            "marketData",
            "signals",
            "overallRecommendation",
            "analysisTime",
            "strategies",
        }
        assert data["pair"] == "EUR/USD"
        assert data["analysisTime"] == "2025-03-03T12:00:05Z"
        assert data["marketData"]["timestamp"] == "2025-03-03T12:00:00Z"
        assert data["marketData"]["change24h"] == 0.5
        assert set(data["signals"][0]) == {
            "direction",
            "confidence",
            "strategy",
            "reasoning",
            "timeframe",
            "riskLevel",
            "expectedMove",
        }
        assert data["strategies"]["volatility"] == data["signals"][4]

    def test_wrong_signal_count_rejected(self):
        result = compute_signals(_market(0.5), rng=random.Random(8), clock=_clock)
        with pytest.raises(ValueError, match="Expected 5 signals"):
            AnalysisResult(
                market_data=result.market_data,
                signals=result.signals[:4],
                overall_recommendation=result.overall_recommendation,
                analysis_time=_NOW,
            )
