"""Internal API routers — /fetch-market-data, /predictions, /notifications endpoints.

No business logic. Delegates to the market data adapters, the signal
computation and the shared dashboard state.
"""

import logging
import random
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from fxpulse.dashboard.state import DashboardState
from fxpulse.market.base import (
    MarketDataSource,
    QuoteUnavailableError,
    UnsupportedPairError,
)
from fxpulse.market.quote_client import ticker_for
from fxpulse.signals.analysis import compute_signals
from fxpulse.signals.rules import DASHBOARD_RULES, RuleSet

logger = logging.getLogger("fxpulse")
router = APIRouter()

CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"

# ── Shared state (set during app startup) ────────────────────────────────

_quote_source: Optional[MarketDataSource] = None  # Set via configure_routers()
_dashboard: Optional[DashboardState] = None  # Set via configure_routers()
_rules: RuleSet = DASHBOARD_RULES
_rng: random.Random = random.Random()
_cors_origin: str = "*"


def configure_routers(
    quote_source: Optional[MarketDataSource] = None,
    dashboard: Optional[DashboardState] = None,
    rules: RuleSet = DASHBOARD_RULES,
    rng: Optional[random.Random] = None,
    cors_origin: str = "*",
) -> None:
    """Inject dependencies from the application startup.

    Args:
        quote_source: Adapter used by the edge endpoint (``QuoteClient``
            or any ``MarketDataSource`` for tests).
        dashboard: ``DashboardState`` backing the /predictions endpoints.
        rules: Constant table for the edge endpoint's analyses.
        rng: Random source for the edge endpoint's analyses.
        cors_origin: Value of ``Access-Control-Allow-Origin``.
    """
    global _quote_source, _dashboard, _rules, _rng, _cors_origin  # noqa: PLW0603
    _quote_source = quote_source
    _dashboard = dashboard
    _rules = rules
    _rng = rng if rng is not None else random.Random()
    _cors_origin = cors_origin


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": _cors_origin,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }


def _json(content: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=cors_headers())


def _error(message: str, status_code: int) -> JSONResponse:
    return _json({"error": message}, status_code=status_code)


def pair_from_slug(slug: str) -> str:
    """``EUR-JPY`` → ``EUR/JPY`` (pairs cannot travel raw in a path)."""
    return slug.upper().replace("-", "/")


# ── Edge endpoint ────────────────────────────────────────────────────────


@router.options("/fetch-market-data")
async def fetch_market_data_preflight():
    """CORS preflight — fixed headers, empty body."""
    return Response(status_code=200, headers=cors_headers())


@router.post("/fetch-market-data")
async def fetch_market_data(request: Request):
    """Fetch a live quote for ``{"pair": ...}`` and return its analysis."""
    try:
        body = await request.json()
        pair = body.get("pair") if isinstance(body, dict) else None
        if not pair:
            return _error("Missing currency pair", 400)
        ticker_for(pair)

        if _quote_source is None:
            return _error("Quote source not configured", 500)

        market = await _quote_source.get_market_data(pair)
        result = compute_signals(market, rules=_rules, rng=_rng)
        return _json(result.to_dict())

    except UnsupportedPairError as exc:
        return _error(str(exc), 400)
    except QuoteUnavailableError as exc:
        logger.warning("%s", exc)
        return _error(str(exc), 500)
    except Exception as exc:
        logger.exception("Error fetching market data")
        return _error(str(exc), 500)


# ── Dashboard ────────────────────────────────────────────────────────────


@router.get("/predictions")
async def get_predictions():
    """Return the latest analysis, loading flag and update time per pair."""
    if _dashboard is None:
        return {"predictions": {}, "loading": {}, "last_update": None}
    return _dashboard.snapshot()


@router.post("/predictions/refresh")
async def refresh_all_predictions():
    """Re-analyse every pair concurrently."""
    if _dashboard is None:
        return _error("Dashboard not configured", 500)
    success = await _dashboard.refresh_all()
    return {"success": success, **_dashboard.snapshot()}


@router.post("/predictions/{pair_slug}/refresh")
async def refresh_prediction(pair_slug: str):
    """Re-analyse one pair, e.g. ``/predictions/EUR-USD/refresh``."""
    if _dashboard is None:
        return _error("Dashboard not configured", 500)
    pair = pair_from_slug(pair_slug)
    try:
        result = await _dashboard.analyze_pair(pair)
    except UnsupportedPairError as exc:
        return _error(str(exc), 400)
    if result is None:
        return {"success": False, "prediction": _dashboard.snapshot()["predictions"][pair]}
    return {"success": True, "prediction": result.to_dict()}


@router.get("/notifications")
async def get_notifications():
    """Return recent dashboard notifications, oldest first."""
    if _dashboard is None:
        return {"notifications": []}
    return {"notifications": [n.to_dict() for n in _dashboard.notifications]}
