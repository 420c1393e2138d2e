"""Market snapshots from the Yahoo Finance chart endpoint."""

from typing import Any, Dict, List, Optional

import requests

from morning_report.core.logger import logger
from morning_report.core.throttle import throttled
from morning_report.models.datatypes import Quote
from morning_report.providers.base import MarketDataProvider

_CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart/{symbol}"
_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class YahooChartProvider(MarketDataProvider):
    """Yahoo Finance ``/v8/finance/chart`` implementation for quote snapshots.

    Reads ``chart.result[0].meta`` only. ``regularMarketPrice`` and
    ``previousClose`` are required; everything else degrades to a default.

    Args:
        timeout: Per-request connect/read timeout in seconds.
        request_delay: Pause between consecutive symbol requests in seconds.
        session: Optional ``requests.Session`` (created if not provided).
    """

    def __init__(
        self,
        timeout: float = 30.0,
        request_delay: float = 0.1,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.request_delay = request_delay
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": _USER_AGENT})

    def fetch_quotes(self, symbols: List[str]) -> List[Quote]:
        """
        Fetch a snapshot for each symbol in order, keeping only successes.

        Args:
            symbols (List[str]): Symbols in report order.

        Returns:
            List[Quote]: Snapshots in the order of ``symbols``, failures omitted.
        """
        logger.info(f"Fetching market data for {len(symbols)} symbols")
        quotes: List[Quote] = []
        for symbol in throttled(symbols, self.request_delay):
            try:
                quote = self.fetch_quote(symbol)
            except Exception as exc:
                logger.warning(f"Unexpected error fetching {symbol}: {exc}", exc_info=True)
                continue
            if quote is not None:
                quotes.append(quote)

        logger.info(f"Fetched data for {len(quotes)}/{len(symbols)} symbols")
        return quotes

    def fetch_quote(self, symbol: str) -> Optional[Quote]:
        """
        Fetch the latest snapshot for one symbol.

        Args:
            symbol (str): Ticker or index symbol.

        Returns:
            Optional[Quote]: The snapshot, or None on any failure.
        """
        url = _CHART_URL.format(symbol=symbol)
        params = {"interval": "1d", "range": "5d"}
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning(f"Failed to fetch data for {symbol}: {exc}")
            return None

        if resp.status_code != 200:
            logger.warning(f"Failed to fetch data for {symbol}: HTTP {resp.status_code}")
            return None

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning(f"Malformed JSON for {symbol}: {exc}")
            return None

        meta = _extract_meta(payload)
        if meta is None:
            logger.warning(f"No chart result for {symbol}")
            return None

        return _quote_from_meta(symbol, meta)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()


# ── helpers ───────────────────────────────────────────────────────────────────

def _extract_meta(payload: Any) -> Optional[Dict[str, Any]]:
    """Return ``chart.result[0].meta`` or None if the shape is wrong."""
    if not isinstance(payload, dict):
        return None
    chart = payload.get("chart")
    if not isinstance(chart, dict):
        return None
    result = chart.get("result")
    if not isinstance(result, list) or not result:
        return None
    first = result[0]
    if not isinstance(first, dict):
        return None
    meta = first.get("meta")
    return meta if isinstance(meta, dict) else None


def _quote_from_meta(symbol: str, meta: Dict[str, Any]) -> Optional[Quote]:
    """Build a Quote from a chart ``meta`` object, or None if required fields are unusable."""
    current_price = _as_float(meta.get("regularMarketPrice"))
    previous_close = _as_float(meta.get("previousClose"))
    if current_price is None or previous_close is None:
        logger.warning(f"Missing price fields for {symbol}")
        return None
    if previous_close == 0:
        logger.warning(f"Previous close is zero for {symbol} (div-by-zero risk)")
        return None

    volume = _as_float(meta.get("regularMarketVolume"))
    long_name = meta.get("longName")

    return Quote.from_prices(
        symbol=symbol,
        name=long_name if isinstance(long_name, str) and long_name else symbol,
        previous_close=previous_close,
        current_price=current_price,
        volume=max(int(volume), 0) if volume is not None else 0,
        pre_market_price=_as_float(meta.get("preMarketPrice")) or 0.0,
        pre_market_change=_as_float(meta.get("preMarketChange")) or 0.0,
        pre_market_change_percent=_as_float(meta.get("preMarketChangePercent")) or 0.0,
    )


def _as_float(value: Any) -> Optional[float]:
    """Coerce a JSON number to float; None for null, booleans and non-numerics."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
