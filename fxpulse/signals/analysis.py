"""Analysis entry point — market snapshot in, ``AnalysisResult`` out.

Pure apart from the injected RNG and clock.  Both callers (the edge
endpoint and the dashboard) go through :func:`compute_signals`.
"""

import random
from datetime import datetime, timezone
from typing import Callable, Optional

from fxpulse.signals.aggregator import aggregate
from fxpulse.signals.models import AnalysisResult, MarketData
from fxpulse.signals.rules import DASHBOARD_RULES, RuleSet, evaluate_rules


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def compute_signals(
    market: MarketData,
    rules: RuleSet = DASHBOARD_RULES,
    rng: Optional[random.Random] = None,
    clock: Callable[[], datetime] = utc_now,
) -> AnalysisResult:
    """Evaluate the five strategies and their consensus for *market*.

    Args:
        market: Snapshot to analyse.
        rules: Constant table; defaults to the canonical dashboard rules.
        rng: Random source for the Technical and Sentiment rules.  A fresh
            unseeded ``random.Random`` is used when omitted.
        clock: Supplies ``analysis_time``.

    Returns:
        ``AnalysisResult`` with signals in trend, reversal, technical,
        sentiment, volatility order.
    """
    if rng is None:
        rng = random.Random()

    signals = evaluate_rules(market, rules, rng)
    return AnalysisResult(
        market_data=market,
        signals=tuple(signals),
        overall_recommendation=aggregate(signals, rules),
        analysis_time=clock(),
    )
