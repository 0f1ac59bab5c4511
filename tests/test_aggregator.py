"""Tests for fxpulse.signals.aggregator — consensus vote and averaging."""

import random

import pytest

from fxpulse.signals.aggregator import aggregate, vote
from fxpulse.signals.models import BUY, HIGH, HOLD, LOW, MEDIUM, SELL, TradingSignal
from fxpulse.signals.rules import DASHBOARD_RULES, EDGE_RULES


def _signal(direction: str, confidence: float = 70.0, move: float = 0.5) -> TradingSignal:
    return TradingSignal(
        direction=direction,
        confidence=confidence,
        strategy="test",
        reasoning="test",
        risk_level=MEDIUM,
        expected_move=move,
    )


class TestVote:
    def test_buy_majority(self):
        assert vote([_signal(BUY), _signal(BUY), _signal(SELL)]) == (BUY, 2, 1)

    def test_sell_majority(self):
        assert vote([_signal(SELL), _signal(HOLD), _signal(HOLD)]) == (SELL, 0, 1)

    def test_tie_holds(self):
        signals = [_signal(BUY), _signal(SELL), _signal(HOLD), _signal(BUY), _signal(SELL)]
        assert vote(signals) == (HOLD, 2, 2)

    def test_all_hold(self):
        assert vote([_signal(HOLD)] * 5) == (HOLD, 0, 0)


class TestAggregate:
    def test_consensus_fields(self):
        signals = [
            _signal(BUY, 90, 1.0),
            _signal(BUY, 80, 0.5),
            _signal(SELL, 70, 0.5),
            _signal(HOLD, 60, 0.0),
            _signal(BUY, 85, 0.5),
        ]
        overall = aggregate(signals, DASHBOARD_RULES)
        assert overall.direction == BUY
        assert overall.confidence == 77
        assert overall.risk_level == MEDIUM
        assert overall.expected_move == pytest.approx(0.5)
        assert overall.strategy == "Consensus Multi-Stratégies AI"
        assert overall.timeframe == "3 minutes"
        assert overall.reasoning == (
            "3 signaux d'achat, 1 signaux de vente sur 5 stratégies analysées"
        )

    def test_rounds_half_up(self):
        signals = [_signal(HOLD, c) for c in (60, 61, 60, 61, 60.5)]
        assert aggregate(signals, DASHBOARD_RULES).confidence == 61

    def test_dashboard_risk_bands(self):
        assert aggregate([_signal(BUY, 81)] * 5, DASHBOARD_RULES).risk_level == LOW
        assert aggregate([_signal(BUY, 80)] * 5, DASHBOARD_RULES).risk_level == MEDIUM
        assert aggregate([_signal(BUY, 61)] * 5, DASHBOARD_RULES).risk_level == MEDIUM
        assert aggregate([_signal(BUY, 60)] * 5, DASHBOARD_RULES).risk_level == HIGH

    def test_edge_risk_bands_and_wording(self):
        overall = aggregate([_signal(SELL, 71)] * 5, EDGE_RULES)
        assert overall.risk_level == LOW
        assert overall.reasoning == "0 signaux d'achat, 5 signaux de vente"
        assert aggregate([_signal(SELL, 51)] * 5, EDGE_RULES).risk_level == MEDIUM
        assert aggregate([_signal(SELL, 50)] * 5, EDGE_RULES).risk_level == HIGH

    def test_confidence_held_within_input_range(self):
        # Mean 85.4 would round to 85, below every input
        signals = [_signal(BUY, 85.4)] * 5
        assert aggregate(signals, DASHBOARD_RULES).confidence == pytest.approx(85.4)

    def test_confidence_range_property(self):
        rng = random.Random(11)
        for _ in range(500):
            signals = [
                _signal(rng.choice([BUY, SELL, HOLD]), rng.uniform(40, 95))
                for _ in range(5)
            ]
            confidences = [s.confidence for s in signals]
            overall = aggregate(signals, DASHBOARD_RULES)
            assert min(confidences) <= overall.confidence <= max(confidences)

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="empty"):
            aggregate([], DASHBOARD_RULES)
