"""Consensus aggregation — majority vote with confidence averaging."""

import math
from typing import Sequence

from fxpulse.signals.models import (
    BUY,
    CONSENSUS_STRATEGY,
    HIGH,
    HOLD,
    LOW,
    MEDIUM,
    SELL,
    TradingSignal,
)
from fxpulse.signals.rules import RuleSet


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def vote(signals: Sequence[TradingSignal]) -> tuple[str, int, int]:
    """Return ``(direction, buy_count, sell_count)``.

    Ties, including all-HOLD sets, resolve to HOLD.
    """
    buys = sum(1 for s in signals if s.direction == BUY)
    sells = sum(1 for s in signals if s.direction == SELL)
    if buys > sells:
        return BUY, buys, sells
    if sells > buys:
        return SELL, buys, sells
    return HOLD, buys, sells


def aggregate(signals: Sequence[TradingSignal], rules: RuleSet) -> TradingSignal:
    """Reduce per-strategy signals to one overall recommendation.

    Confidence is the rounded mean, held inside the range spanned by the
    inputs.  Risk is banded on the unrounded mean using the rule set's
    consensus thresholds.

    Raises:
        ValueError: If *signals* is empty.
    """
    if not signals:
        raise ValueError("Cannot aggregate an empty signal list")

    direction, buys, sells = vote(signals)

    confidences = [s.confidence for s in signals]
    mean_confidence = sum(confidences) / len(confidences)
    confidence = min(
        max(_round_half_up(mean_confidence), min(confidences)),
        max(confidences),
    )

    if mean_confidence > rules.overall_low_risk_above:
        risk = LOW
    elif mean_confidence > rules.overall_medium_risk_above:
        risk = MEDIUM
    else:
        risk = HIGH

    return TradingSignal(
        direction=direction,
        confidence=confidence,
        strategy=CONSENSUS_STRATEGY,
        reasoning=rules.messages["overall.reasoning"].format(
            buy=buys, sell=sells, total=len(signals),
        ),
        risk_level=risk,
        expected_move=sum(s.expected_move for s in signals) / len(signals),
    )
