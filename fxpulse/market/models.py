"""Quote provider models — typed representation of a Yahoo Finance quote."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Quote:
    """The subset of quote fields the analysis consumes."""

    symbol: str
    regular_market_price: float
    regular_market_change_percent: float
    regular_market_time: int  # Unix seconds
    regular_market_volume: int
    bid: Optional[float] = None
    ask: Optional[float] = None

    @classmethod
    def from_json(cls, raw: dict) -> "Quote":
        """Build from one entry of ``quoteResponse.result``."""
        bid = raw.get("bid")
        ask = raw.get("ask")
        return cls(
            symbol=raw["symbol"],
            regular_market_price=float(raw["regularMarketPrice"]),
            regular_market_change_percent=float(
                raw.get("regularMarketChangePercent", 0.0)
            ),
            regular_market_time=int(raw["regularMarketTime"]),
            regular_market_volume=int(raw.get("regularMarketVolume") or 0),
            bid=float(bid) if bid else None,
            ask=float(ask) if ask else None,
        )

    @property
    def market_time(self) -> datetime:
        """``regular_market_time`` as an aware UTC datetime."""
        return datetime.fromtimestamp(self.regular_market_time, tz=timezone.utc)
