"""Yahoo Finance quote API async client.

Maps a currency pair to its ticker, fetches one quote and normalises it
into ``MarketData``.
"""

import logging

import httpx

from fxpulse.config import Config
from fxpulse.market.base import QuoteUnavailableError, UnsupportedPairError
from fxpulse.market.models import Quote
from fxpulse.signals.models import MarketData

logger = logging.getLogger("fxpulse.market")

TICKER_MAP: dict[str, str] = {
    "EUR/JPY": "EURJPY=X",
    "EUR/USD": "EURUSD=X",
}


def ticker_for(pair: str) -> str:
    """Return the provider ticker for *pair*.

    Raises ``UnsupportedPairError`` if the pair is not a mapped string.
    """
    if not isinstance(pair, str) or pair not in TICKER_MAP:
        raise UnsupportedPairError(pair)
    return TICKER_MAP[pair]


def quote_to_market_data(pair: str, quote: Quote) -> MarketData:
    """Normalise a provider quote.

    FX quotes often come without bid/ask outside market hours; the last
    price stands in for both.
    """
    price = quote.regular_market_price
    return MarketData(
        pair=pair,
        current_price=price,
        change_24h=quote.regular_market_change_percent,
        timestamp=quote.market_time,
        volume=quote.regular_market_volume,
        bid=quote.bid if quote.bid is not None else price,
        ask=quote.ask if quote.ask is not None else price,
    )


class QuoteClient:
    """Async client wrapping the Yahoo Finance v7 quote endpoint.

    One request per quote, bounded by the configured timeout.  Provider
    errors propagate to the caller unchanged.
    """

    def __init__(self, config: Config) -> None:
        self._config = config
        self._base_url = config.quote_api_base_url
        self._timeout = config.quote_timeout_seconds
        self._headers = {
            "Accept": "application/json",
            "User-Agent": "fxpulse/0.1",
        }

    # ── Quotes ───────────────────────────────────────────────────────────

    async def fetch_quotes(self, ticker: str) -> list[Quote]:
        """Fetch quotes for *ticker*.

        Returns:
            List of ``Quote`` objects; empty when the provider knows
            nothing about the symbol.

        Raises:
            httpx.HTTPStatusError: The provider answered with an error status.
            httpx.TransportError: The request failed or timed out.
        """
        url = f"{self._base_url}/v7/finance/quote"
        async with httpx.AsyncClient() as client:
            resp = await client.get(
                url,
                headers=self._headers,
                params={"symbols": ticker},
                timeout=self._timeout,
            )
        resp.raise_for_status()

        data = resp.json()
        results = (data.get("quoteResponse") or {}).get("result") or []
        return [Quote.from_json(q) for q in results]

    async def get_market_data(self, pair: str) -> MarketData:
        """Fetch the current quote for *pair* as ``MarketData``.

        Raises:
            UnsupportedPairError: *pair* has no ticker mapping.
            QuoteUnavailableError: The provider returned no quotes.
        """
        ticker = ticker_for(pair)
        quotes = await self.fetch_quotes(ticker)
        if not quotes:
            raise QuoteUnavailableError(pair)

        market = quote_to_market_data(pair, quotes[0])
        logger.debug(
            "Quote %s (%s): price=%.5f change=%.3f%%",
            pair, ticker, market.current_price, market.change_24h,
        )
        return market
