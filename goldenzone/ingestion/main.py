"""
Golden Zone command line entry point

Fetches (or loads from the cache) a ticker's daily history, runs the snapshot
analysis and the Golden Zone backtest, and prints a report.

    goldenzone AAPL
    goldenzone AAPL --current-price 182.50 --json
    goldenzone AAPL --csv prices.csv
"""
import argparse
import asyncio
import json
import sys
from typing import List, Optional, Tuple

import pandas as pd

from goldenzone.ingestion.fmp_service import FMPIngestionService, parse_historical
from goldenzone.shared.database import init_db
from goldenzone.shared.logger import setup_logger
from goldenzone.strategy.alerts.narrative import DISCLAIMER
from goldenzone.strategy.analyzer import analyze
from goldenzone.strategy.backtest.golden_zone import backtest
from goldenzone.strategy.core.errors import GoldenZoneError, InsufficientDataError
from goldenzone.strategy.core.models import AnalysisResult, BacktestResult, PriceBar

logger = setup_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goldenzone",
        description="Fibonacci retracement analysis and Golden Zone backtest for a ticker.",
    )
    parser.add_argument("ticker", help="Ticker symbol, e.g. AAPL")
    parser.add_argument(
        "--current-price",
        type=float,
        default=None,
        help="Price to classify (default: the latest close)",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Ignore the cached history and fetch it again",
    )
    parser.add_argument(
        "--csv",
        default=None,
        help="Read daily bars from a CSV file (date,open,high,low,close[,volume]) instead of fetching",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def load_csv(path: str) -> List[PriceBar]:
    """Load daily bars from a CSV file, oldest first, with the same row checks as fetched history."""
    df = pd.read_csv(path)
    df.columns = [str(column).strip().lower() for column in df.columns]
    df = df.dropna(subset=["date", "open", "high", "low", "close"])
    if "volume" in df.columns:
        df["volume"] = df["volume"].fillna(0.0)
    df["date"] = pd.to_datetime(df["date"]).dt.date
    return parse_historical(df.to_dict("records"))


def run_analysis(
    ticker: str,
    prices: List[PriceBar],
    current_price: Optional[float] = None
) -> Tuple[AnalysisResult, Optional[BacktestResult], Optional[str]]:
    """
    Run the snapshot analysis and, when the history is long enough, the backtest.

    Returns:
        (analysis, backtest_result, backtest_note); the note explains a skipped backtest
    """
    analysis = analyze(ticker, prices, current_price)
    try:
        result = backtest(ticker, prices)
    except InsufficientDataError as e:
        logger.warning(f"Skipping backtest for {ticker.upper()}: {e}")
        return analysis, None, str(e)
    return analysis, result, None


def format_report(
    analysis: AnalysisResult,
    result: Optional[BacktestResult],
    backtest_note: Optional[str] = None
) -> str:
    """Render a plain-text report."""
    lines = [
        f"{analysis.ticker}: {analysis.trend_label} ({analysis.trend.value})",
        f"  Peak:  ${analysis.swing_high.price:.2f} on {analysis.swing_high.date.isoformat()}",
        f"  Floor: ${analysis.swing_low.price:.2f} on {analysis.swing_low.date.isoformat()}",
        f"  Range: ${analysis.range:.2f}",
        "",
        "  Retracement levels:",
    ]
    for level in analysis.levels:
        marker = "  <- Golden Zone" if level.is_golden_zone else ""
        lines.append(
            f"    {level.label:>6}  {level.friendly_name:<18} ${level.price:>10.2f}  "
            f"{level.category.value}{marker}"
        )
    lines += [
        "",
        f"  Current price: ${analysis.current_price:.2f}",
        f"  Signal: {analysis.signal.value.upper()}",
        f"  {analysis.reason}",
        "",
        f"  {analysis.narrative}",
        "",
    ]

    if result is not None:
        lines.append(f"  Backtest: {result.summary}")
        for touch in result.touches:
            lines.append(
                f"    {touch.date.isoformat()}  close ${touch.touch_price:.2f}  "
                f"golden ${touch.golden_level_price:.2f}  {touch.trend.value:<9}  "
                f"{touch.percent_change:+.2f}%  {touch.outcome.value}"
            )
    elif backtest_note:
        lines.append(f"  Backtest skipped: {backtest_note}")

    lines += ["", DISCLAIMER]
    return "\n".join(lines)


async def load_prices(args: argparse.Namespace) -> Tuple[Optional[List[PriceBar]], Optional[str]]:
    if args.csv:
        try:
            return load_csv(args.csv), None
        except (OSError, KeyError, ValueError) as e:
            logger.error(f"Error reading {args.csv}: {e}")
            return None, f"Couldn't read price data from {args.csv}: {e}"

    if not init_db():
        logger.warning("Continuing without the price cache")

    async with FMPIngestionService() as service:
        return await service.get_historical_prices(args.ticker, refresh=args.refresh)


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code"""
    args = build_parser().parse_args(argv)

    prices, error = await load_prices(args)
    if error:
        print(error, file=sys.stderr)
        return 1

    try:
        analysis, result, note = run_analysis(args.ticker, prices, args.current_price)
    except GoldenZoneError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.json:
        payload = {
            "analysis": analysis.to_dict(),
            "backtest": result.to_dict() if result is not None else None,
            "backtest_note": note,
            "disclaimer": DISCLAIMER,
        }
        print(json.dumps(payload, indent=2))
    else:
        print(format_report(analysis, result, note))
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
