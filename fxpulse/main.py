"""FXPulse — application entry point.

Boots the FastAPI internal server and provides the CLI entry point for
serve and one-shot analyze modes.
"""

import logging
import random

from fastapi import FastAPI

from fxpulse.api.routers import configure_routers, router
from fxpulse.config import Config
from fxpulse.dashboard.state import DashboardState
from fxpulse.market.quote_client import QuoteClient
from fxpulse.market.synthetic import SyntheticMarketData
from fxpulse.signals.rules import get_rule_set

app = FastAPI(title="FXPulse Signal API", version="0.1.0")
app.include_router(router)

logger = logging.getLogger("fxpulse")


@app.get("/health")
async def health():
    """Liveness check."""
    return {"status": "ok"}


def build_dashboard(config: Config, source: str | None = None) -> DashboardState:
    """Assemble a ``DashboardState`` from config.

    *source* overrides ``config.data_source`` (``"synthetic"`` or ``"live"``).
    """
    rng = random.Random(config.random_seed)
    if (source or config.data_source) == "live":
        data_source = QuoteClient(config)
    else:
        data_source = SyntheticMarketData(rng=rng)
    return DashboardState(
        source=data_source,
        rules=get_rule_set(config.rule_profile),
        rng=rng,
    )


def configure_app(config: Config) -> DashboardState:
    """Wire routers with the quote client and dashboard built from *config*."""
    dashboard = build_dashboard(config)
    configure_routers(
        quote_source=QuoteClient(config),
        dashboard=dashboard,
        rules=get_rule_set(config.rule_profile),
        rng=random.Random(config.random_seed),
        cors_origin=config.cors_allow_origin,
    )
    return dashboard


# ── CLI ──────────────────────────────────────────────────────────────────


def _run_cli() -> None:
    """Parse CLI arguments and dispatch to the appropriate mode."""
    import argparse
    import asyncio

    from fxpulse.config import load_config
    from fxpulse.signals.models import CURRENCY_PAIRS

    parser = argparse.ArgumentParser(description="FXPulse trading signal dashboard")
    parser.add_argument(
        "--mode",
        choices=["serve", "analyze"],
        default="serve",
        help="Run the API server or print one analysis (default: serve)",
    )
    parser.add_argument(
        "--pair",
        choices=list(CURRENCY_PAIRS),
        help="Pair to analyse (default: all pairs)",
    )
    parser.add_argument(
        "--source",
        choices=["synthetic", "live"],
        help="Market data source (default: DATA_SOURCE from .env)",
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible signals")
    args = parser.parse_args()

    config = load_config()
    if args.seed is not None:
        from dataclasses import replace

        config = replace(config, random_seed=args.seed)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.mode == "analyze":
        asyncio.run(_run_analyze(config, args.pair, args.source))
    else:
        _run_server(config)


async def _run_analyze(config: Config, pair: str | None, source: str | None) -> None:
    """Analyse one or all pairs and print the console dashboard."""
    from fxpulse.cli.dashboard import print_predictions

    dashboard = build_dashboard(config, source)
    if pair:
        await dashboard.analyze_pair(pair)
    else:
        await dashboard.refresh_all()

    results = [r for r in dashboard.predictions.values() if r is not None]
    print_predictions(results)
    for note in dashboard.notifications:
        if note.level == "error":
            logger.error(note.message)


def _run_server(config: Config) -> None:
    """Start the API server."""
    import uvicorn

    configure_app(config)
    logger.info(
        "Starting FXPulse API on port %d (rules=%s, source=%s).",
        config.http_port, config.rule_profile, config.data_source,
    )
    uvicorn.run(app, host="0.0.0.0", port=config.http_port, log_level="info")


if __name__ == "__main__":
    _run_cli()
