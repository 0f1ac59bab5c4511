"""Market data source protocol and adapter errors.

Defines the interface that both the live-quote and synthetic adapters
satisfy, so callers can swap one for the other.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from fxpulse.signals.models import MarketData


class UnsupportedPairError(ValueError):
    """Raised when a pair is not in the fixed enumeration."""

    def __init__(self, pair: str) -> None:
        super().__init__(f"Unsupported currency pair: {pair}")
        self.pair = pair


class QuoteUnavailableError(RuntimeError):
    """Raised when the quote provider returns no data for a pair."""

    def __init__(self, pair: str) -> None:
        super().__init__(f"Could not fetch data for {pair}")
        self.pair = pair


@runtime_checkable
class MarketDataSource(Protocol):
    """Interface that all market data adapters must satisfy."""

    async def get_market_data(self, pair: str) -> MarketData:
        """Return a fresh snapshot for *pair*."""
        ...
