"""Dashboard state — latest analysis per pair plus a notification log.

One entry per enumerated pair, held in memory for the life of the process.
Each pair's analysis only touches its own keyed entries, so
:meth:`DashboardState.refresh_all` can run them concurrently.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from fxpulse.market.base import MarketDataSource, UnsupportedPairError
from fxpulse.signals import locale
from fxpulse.signals.analysis import compute_signals, utc_now
from fxpulse.signals.models import CURRENCY_PAIRS, AnalysisResult
from fxpulse.signals.rules import DASHBOARD_RULES, RuleSet

logger = logging.getLogger("fxpulse.dashboard")

_MAX_NOTIFICATIONS = 50


@dataclass(frozen=True)
class Notification:
    """A transient, toast-style message."""

    level: str  # "success", "error" or "loading"
    message: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "message": self.message,
            "created_at": self.created_at.isoformat(),
        }


class DashboardState:
    """Process-local view state for the dashboard.

    Args:
        source: Market data adapter used for every analysis.
        rules: Constant table handed to ``compute_signals``.
        rng: Random source for the Technical and Sentiment rules.
        pairs: Pairs tracked by the dashboard.
        clock: Supplies analysis and notification timestamps.
    """

    def __init__(
        self,
        source: MarketDataSource,
        rules: RuleSet = DASHBOARD_RULES,
        rng: Optional[random.Random] = None,
        pairs: tuple[str, ...] = CURRENCY_PAIRS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._source = source
        self._rules = rules
        self._rng = rng if rng is not None else random.Random()
        self._pairs = tuple(pairs)
        self._clock = clock
        self.predictions: dict[str, Optional[AnalysisResult]] = {}
        self.loading: dict[str, bool] = {}
        self.last_update: Optional[datetime] = None
        self.notifications: list[Notification] = []
        self.reset()

    @property
    def pairs(self) -> tuple[str, ...]:
        return self._pairs

    def reset(self) -> None:
        """Clear all predictions, loading flags and notifications."""
        self.predictions = {p: None for p in self._pairs}
        self.loading = {p: False for p in self._pairs}
        self.last_update = None
        self.notifications = []

    def notify(self, level: str, message: str) -> None:
        """Append a notification, keeping the most recent 50."""
        self.notifications.append(Notification(level, message, self._clock()))
        if len(self.notifications) > _MAX_NOTIFICATIONS:
            del self.notifications[0]

    async def analyze_pair(self, pair: str) -> Optional[AnalysisResult]:
        """Fetch fresh data for *pair*, analyse it and store the result.

        Failures are logged and surfaced as an error notification; the
        previous prediction for the pair is left in place and ``None`` is
        returned.

        Raises ``UnsupportedPairError`` if *pair* is not tracked.
        """
        if pair not in self.predictions:
            raise UnsupportedPairError(pair)

        self.loading[pair] = True
        try:
            market = await self._source.get_market_data(pair)
            result = compute_signals(
                market, rules=self._rules, rng=self._rng, clock=self._clock,
            )
        except Exception:
            logger.exception("Analysis failed for %s", pair)
            self.notify("error", locale.NOTIFY_PAIR_ERROR.format(pair=pair))
            return None
        finally:
            self.loading[pair] = False

        self.predictions[pair] = result
        self.last_update = self._clock()
        self.notify("success", locale.NOTIFY_PAIR_SUCCESS.format(pair=pair))
        logger.info(
            "%s → %s (%s%%)",
            pair,
            result.overall_recommendation.direction,
            result.overall_recommendation.confidence,
        )
        return result

    async def refresh_all(self) -> bool:
        """Analyse every tracked pair concurrently.

        Returns ``True`` only if every pair produced a result.  No detail
        about which pair failed is reported.
        """
        self.notify("loading", locale.NOTIFY_REFRESH_LOADING)
        results = await asyncio.gather(
            *(self.analyze_pair(p) for p in self._pairs),
            return_exceptions=True,
        )
        ok = all(isinstance(r, AnalysisResult) for r in results)
        if ok:
            self.notify("success", locale.NOTIFY_REFRESH_SUCCESS)
        else:
            self.notify("error", locale.NOTIFY_REFRESH_ERROR)
        return ok

    def snapshot(self) -> dict:
        """Return the JSON-ready view of the current state."""
        return {
            "predictions": {
                p: (r.to_dict() if r is not None else None)
                for p, r in self.predictions.items()
            },
            "loading": dict(self.loading),
            "last_update": (
                self.last_update.isoformat() if self.last_update else None
            ),
        }
