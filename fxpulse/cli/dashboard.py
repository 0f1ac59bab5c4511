"""CLI dashboard — prints an analysis to the console."""

from fxpulse.signals.models import AnalysisResult, TradingSignal


def _price_format(pair: str) -> str:
    return ".3f" if pair.endswith("JPY") else ".5f"


def _signal_line(name: str, signal: TradingSignal) -> str:
    return (
        f"  {name:<11} {signal.direction:<5} {signal.confidence:>5.1f}%  "
        f"risk={signal.risk_level:<6} move={signal.expected_move:.2f}%"
    )


def format_prediction(result: AnalysisResult) -> str:
    """Format one pair's analysis as a text block."""
    market = result.market_data
    overall = result.overall_recommendation
    fmt = _price_format(market.pair)

    lines = [
        f"──────────────── {market.pair} ────────────────",
        f"  Price:       {market.current_price:{fmt}}"
        f"  (bid {market.bid:{fmt}} / ask {market.ask:{fmt}})",
        f"  Change 24h:  {market.change_24h:+.2f}%",
        f"  Volume:      {market.volume:,}",
        "",
        f"  Recommandation: {overall.direction}  "
        f"Confiance {overall.confidence:.0f}%  Risque {overall.risk_level}",
        f"  Mouvement attendu: {overall.expected_move:.2f}%"
        f"  Horizon: {overall.timeframe}",
        f"  {overall.reasoning}",
        "",
    ]
    for name, signal in result.strategies.items():
        lines.append(_signal_line(name, signal))
        lines.append(f"              {signal.strategy} — {signal.reasoning}")
    lines.append(
        f"  Analysé à {result.analysis_time.strftime('%H:%M:%S')} UTC"
    )
    lines.append("─" * 46)
    return "\n".join(lines)


def print_predictions(results: list[AnalysisResult]) -> str:
    """Format and print several analyses.

    Returns:
        The formatted string (also printed to stdout).
    """
    output = "\n\n".join(format_prediction(r) for r in results)
    print(output)
    return output
