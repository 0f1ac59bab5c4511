"""Signal data models — typed representations for analysis inputs and outputs."""

from dataclasses import dataclass, field
from datetime import datetime


# ── Enumerations ─────────────────────────────────────────────────────────

BUY = "BUY"
SELL = "SELL"
HOLD = "HOLD"
DIRECTIONS = (BUY, SELL, HOLD)

LOW = "LOW"
MEDIUM = "MEDIUM"
HIGH = "HIGH"
RISK_LEVELS = (LOW, MEDIUM, HIGH)

CURRENCY_PAIRS: tuple[str, ...] = ("EUR/JPY", "EUR/USD")

# Fixed evaluation order; ``AnalysisResult.signals`` follows it positionally.
STRATEGY_KEYS: tuple[str, ...] = (
    "trend",
    "reversal",
    "technical",
    "sentiment",
    "volatility",
)

TIMEFRAME = "3 minutes"
CONSENSUS_STRATEGY = "Consensus Multi-Stratégies AI"


def _iso(ts: datetime) -> str:
    return ts.isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class MarketData:
    """One currency pair's snapshot.

    ``bid <= current_price <= ask`` is not validated; quote providers and the
    synthetic generator are trusted as-is.
    """

    pair: str
    current_price: float
    change_24h: float  # percent, signed
    timestamp: datetime
    volume: int
    bid: float
    ask: float

    def to_dict(self) -> dict:
        return {
            "pair": self.pair,
            "currentPrice": self.current_price,
            "change24h": self.change_24h,
            "timestamp": _iso(self.timestamp),
            "volume": self.volume,
            "bid": self.bid,
            "ask": self.ask,
        }


@dataclass(frozen=True)
class TradingSignal:
    """One strategy's verdict."""

    direction: str  # BUY / SELL / HOLD
    confidence: float  # 0-100
    strategy: str
    reasoning: str
    risk_level: str  # LOW / MEDIUM / HIGH
    expected_move: float  # percent, non-negative
    timeframe: str = TIMEFRAME

    def to_dict(self) -> dict:
        return {
            "direction": self.direction,
            "confidence": self.confidence,
            "strategy": self.strategy,
            "reasoning": self.reasoning,
            "timeframe": self.timeframe,
            "riskLevel": self.risk_level,
            "expectedMove": self.expected_move,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """The full output of one analysis.

    ``strategies`` is a keyed view over ``signals``: ``strategies["trend"]``
    is ``signals[0]`` and so on, following ``STRATEGY_KEYS``.
    """

    market_data: MarketData
    signals: tuple[TradingSignal, ...]
    overall_recommendation: TradingSignal
    analysis_time: datetime
    strategies: dict[str, TradingSignal] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.signals) != len(STRATEGY_KEYS):
            raise ValueError(
                f"Expected {len(STRATEGY_KEYS)} signals, got {len(self.signals)}"
            )
        object.__setattr__(self, "signals", tuple(self.signals))
        object.__setattr__(
            self, "strategies", dict(zip(STRATEGY_KEYS, self.signals))
        )

    @property
    def pair(self) -> str:
        return self.market_data.pair

    def to_dict(self) -> dict:
        """Serialise to the JSON wire shape (timestamps as ISO-8601)."""
        return {
            "pair": self.pair,
            "marketData": self.market_data.to_dict(),
            "signals": [s.to_dict() for s in self.signals],
            "overallRecommendation": self.overall_recommendation.to_dict(),
            "analysisTime": _iso(self.analysis_time),
            "strategies": {k: s.to_dict() for k, s in self.strategies.items()},
        }
