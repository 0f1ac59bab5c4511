"""Synthetic market data — plausible fake snapshots for the dashboard.

Perturbs a fixed base price per pair with uniform noise scaled by a
pair-specific volatility.  Used where the live quote path is unreachable.
"""

import math
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from fxpulse.market.base import UnsupportedPairError
from fxpulse.signals.analysis import utc_now
from fxpulse.signals.models import MarketData


@dataclass(frozen=True)
class PairProfile:
    """Base price and noise amplitude for one pair."""

    base_price: float
    volatility: float


PAIR_PROFILES: dict[str, PairProfile] = {
    "EUR/JPY": PairProfile(base_price=165.50, volatility=0.5),
    "EUR/USD": PairProfile(base_price=1.0850, volatility=0.002),
}

SPREAD_HALF_WIDTH = 0.001
VOLUME_BASE = 500_000
VOLUME_SPAN = 1_000_000


class SyntheticMarketData:
    """Generates ``MarketData`` from an injected random source.

    Args:
        rng: Random source; a fresh unseeded ``random.Random`` if omitted.
        clock: Supplies the snapshot timestamp.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock

    def generate(self, pair: str) -> MarketData:
        """Return a fake snapshot for *pair*.

        Draws, in order: price noise, 24h change in ``[-1, 1)``, volume.

        Raises ``UnsupportedPairError`` for pairs without a profile.
        """
        profile = PAIR_PROFILES.get(pair)
        if profile is None:
            raise UnsupportedPairError(pair)

        noise = (self._rng.random() - 0.5) * profile.volatility
        change = (self._rng.random() - 0.5) * 2
        volume = math.floor(self._rng.random() * VOLUME_SPAN) + VOLUME_BASE
        price = profile.base_price + noise

        return MarketData(
            pair=pair,
            current_price=price,
            change_24h=change,
            timestamp=self._clock(),
            volume=volume,
            bid=price - SPREAD_HALF_WIDTH,
            ask=price + SPREAD_HALF_WIDTH,
        )

    async def get_market_data(self, pair: str) -> MarketData:
        return self.generate(pair)
