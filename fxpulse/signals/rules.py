"""Signal rule set — five pure evaluators, no I/O.

Each rule maps a ``MarketData`` snapshot to one ``TradingSignal``.  Numeric
thresholds come from a ``RuleSet`` so the same code serves the dashboard
and the edge deployment.  The Technical and Sentiment rules draw from an
injected ``random.Random``; nothing here touches the module-level RNG.
"""

import math
import random
from dataclasses import dataclass, field

from fxpulse.signals.locale import DASHBOARD_MESSAGES, EDGE_MESSAGES
from fxpulse.signals.models import (
    BUY,
    HIGH,
    HOLD,
    LOW,
    MEDIUM,
    SELL,
    MarketData,
    TradingSignal,
)


@dataclass(frozen=True)
class RuleSet:
    """Named constants for the five rules and the consensus risk bands."""

    name: str

    # Trend
    trend_confidence_scale: float
    trend_confidence_base: float = 60.0
    trend_confidence_cap: float = 95.0
    trend_high_risk_above: float = 1.0
    trend_move_scale: float = 1.2

    # Reversal
    reversal_threshold: float = 1.5
    reversal_confidence: float = 85.0
    reversal_hold_confidence: float = 45.0
    reversal_move: float = 0.8
    reversal_hold_move: float = 0.2

    # Technical (random)
    technical_confidence_base: int = 65
    technical_confidence_span: int = 30
    technical_move_base: float = 0.3
    technical_move_span: float = 0.6

    # Sentiment (random)
    sentiment_buy_above: float = 0.6
    sentiment_sell_below: float = 0.4
    sentiment_high_risk_above: float = 0.7
    sentiment_high_risk_below: float = 0.3
    sentiment_confidence_base: int = 50
    sentiment_confidence_span: int = 40
    sentiment_move_scale: float = 1.5

    # Volatility
    volatility_threshold: float = 1.0
    volatility_confidence_scale: float = 40.0
    volatility_confidence_base: float = 55.0
    volatility_confidence_cap: float = 90.0
    volatility_high_risk_above: float = 1.5
    volatility_medium_risk_above: float = 0.5
    volatility_move_scale: float = 0.8

    # Consensus risk bands (on mean confidence)
    overall_low_risk_above: float = 80.0
    overall_medium_risk_above: float = 60.0

    messages: dict[str, str] = field(default_factory=dict, compare=False)


# Canonical table: the one the dashboard actually runs end-to-end.
DASHBOARD_RULES = RuleSet(
    name="dashboard",
    trend_confidence_scale=50.0,
    messages=DASHBOARD_MESSAGES,
)

# Legacy edge-function constants, kept selectable for parity with old
# deployments.  Volatility risk there is HIGH above the direction threshold
# and MEDIUM otherwise, hence the open lower band.
EDGE_RULES = RuleSet(
    name="edge",
    trend_confidence_scale=2.0,
    trend_high_risk_above=0.5,
    trend_move_scale=0.5,
    reversal_threshold=1.0,
    reversal_confidence=75.0,
    reversal_hold_confidence=40.0,
    reversal_move=0.3,
    reversal_hold_move=0.1,
    volatility_threshold=0.8,
    volatility_confidence_scale=30.0,
    volatility_confidence_base=50.0,
    volatility_confidence_cap=85.0,
    volatility_high_risk_above=0.8,
    volatility_medium_risk_above=-math.inf,
    volatility_move_scale=0.4,
    overall_low_risk_above=70.0,
    overall_medium_risk_above=50.0,
    messages=EDGE_MESSAGES,
)

RULE_SETS: dict[str, RuleSet] = {
    DASHBOARD_RULES.name: DASHBOARD_RULES,
    EDGE_RULES.name: EDGE_RULES,
}


def get_rule_set(name: str) -> RuleSet:
    """Look up a rule set by profile name.

    Raises ``KeyError`` if the profile is not registered.
    """
    if name not in RULE_SETS:
        raise KeyError(
            f"Unknown rule profile '{name}'. "
            f"Available: {', '.join(RULE_SETS.keys())}"
        )
    return RULE_SETS[name]


# ── Rules ────────────────────────────────────────────────────────────────


def trend_signal(market: MarketData, rules: RuleSet) -> TradingSignal:
    """Follow the 24h change: positive → BUY, otherwise SELL.

    A flat market (``change_24h == 0``) falls on the SELL side.
    """
    msg = rules.messages
    change = market.change_24h
    momentum = abs(change)
    rising = change > 0
    return TradingSignal(
        direction=BUY if rising else SELL,
        confidence=min(
            momentum * rules.trend_confidence_scale + rules.trend_confidence_base,
            rules.trend_confidence_cap,
        ),
        strategy=msg["trend.label"],
        reasoning=msg["trend.reasoning"].format(
            trend=msg["trend.up"] if rising else msg["trend.down"],
            momentum=momentum,
        ),
        risk_level=HIGH if momentum > rules.trend_high_risk_above else MEDIUM,
        expected_move=momentum * rules.trend_move_scale,
    )


def reversal_signal(market: MarketData, rules: RuleSet) -> TradingSignal:
    """Fade large moves: above +threshold → SELL, below -threshold → BUY.

    Inside ``[-threshold, +threshold]`` (bounds inclusive) the rule holds.
    """
    msg = rules.messages
    change = market.change_24h
    overbought = change > rules.reversal_threshold
    oversold = change < -rules.reversal_threshold
    active = overbought or oversold

    if overbought:
        direction, reasoning = SELL, msg["reversal.overbought"]
    elif oversold:
        direction, reasoning = BUY, msg["reversal.oversold"]
    else:
        direction, reasoning = HOLD, msg["reversal.neutral"]

    return TradingSignal(
        direction=direction,
        confidence=rules.reversal_confidence if active else rules.reversal_hold_confidence,
        strategy=msg["reversal.label"],
        reasoning=reasoning,
        risk_level=MEDIUM if active else LOW,
        expected_move=rules.reversal_move if active else rules.reversal_hold_move,
    )


def technical_signal(
    market: MarketData, rules: RuleSet, rng: random.Random
) -> TradingSignal:
    """Coin-flip crossover: BUY or SELL, never HOLD.

    Draws three values from *rng*, in order: direction, confidence, move.
    """
    msg = rules.messages
    bullish = rng.random() > 0.5
    confidence = (
        math.floor(rng.random() * rules.technical_confidence_span)
        + rules.technical_confidence_base
    )
    move = rng.random() * rules.technical_move_span + rules.technical_move_base
    return TradingSignal(
        direction=BUY if bullish else SELL,
        confidence=confidence,
        strategy=msg["technical.label"],
        reasoning=msg["technical.reasoning"].format(
            crossover=msg["technical.up"] if bullish else msg["technical.down"],
        ),
        risk_level=MEDIUM,
        expected_move=move,
    )


def sentiment_signal(
    market: MarketData, rules: RuleSet, rng: random.Random
) -> TradingSignal:
    """Score sentiment in ``[0, 1)`` and vote on the score band."""
    msg = rules.messages
    score = rng.random()
    if score > rules.sentiment_buy_above:
        direction, mood = BUY, msg["sentiment.positive"]
    elif score < rules.sentiment_sell_below:
        direction, mood = SELL, msg["sentiment.negative"]
    else:
        direction, mood = HOLD, msg["sentiment.neutral"]

    extreme = (
        score > rules.sentiment_high_risk_above
        or score < rules.sentiment_high_risk_below
    )
    return TradingSignal(
        direction=direction,
        confidence=(
            math.floor(score * rules.sentiment_confidence_span)
            + rules.sentiment_confidence_base
        ),
        strategy=msg["sentiment.label"],
        reasoning=msg["sentiment.reasoning"].format(mood=mood, pair=market.pair),
        risk_level=HIGH if extreme else LOW,
        expected_move=abs(score - 0.5) * rules.sentiment_move_scale,
    )


def volatility_signal(market: MarketData, rules: RuleSet) -> TradingSignal:
    """High absolute change → SELL (caution), otherwise BUY."""
    msg = rules.messages
    level = abs(market.change_24h)
    elevated = level > rules.volatility_threshold

    if level > rules.volatility_high_risk_above:
        risk = HIGH
    elif level > rules.volatility_medium_risk_above:
        risk = MEDIUM
    else:
        risk = LOW

    return TradingSignal(
        direction=SELL if elevated else BUY,
        confidence=min(
            level * rules.volatility_confidence_scale + rules.volatility_confidence_base,
            rules.volatility_confidence_cap,
        ),
        strategy=msg["volatility.label"],
        reasoning=msg["volatility.reasoning"].format(
            level=msg["volatility.high"] if elevated else msg["volatility.normal"],
            advice=(
                msg["volatility.high_advice"] if elevated
                else msg["volatility.normal_advice"]
            ),
        ),
        risk_level=risk,
        expected_move=level * rules.volatility_move_scale,
    )


def evaluate_rules(
    market: MarketData, rules: RuleSet, rng: random.Random
) -> list[TradingSignal]:
    """Run all five rules in ``STRATEGY_KEYS`` order."""
    return [
        trend_signal(market, rules),
        reversal_signal(market, rules),
        technical_signal(market, rules, rng),
        sentiment_signal(market, rules, rng),
        volatility_signal(market, rules),
    ]
