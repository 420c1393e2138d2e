"""Data structures for the morning market report."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    """
    A single symbol's price/volume snapshot for one report run.
    """
    symbol: str
    name: str
    previous_close: float
    current_price: float
    change: float
    change_percent: float
    volume: int = 0
    pre_market_price: float = 0.0
    pre_market_change: float = 0.0
    pre_market_change_percent: float = 0.0

    @classmethod
    def from_prices(
        cls,
        symbol: str,
        name: str,
        previous_close: float,
        current_price: float,
        volume: int = 0,
        pre_market_price: float = 0.0,
        pre_market_change: float = 0.0,
        pre_market_change_percent: float = 0.0,
    ) -> "Quote":
        """Build a Quote, deriving ``change`` and ``change_percent``.

        Raises:
            ValueError: If ``previous_close`` is zero.
        """
        if previous_close == 0:
            raise ValueError(f"previous close for {symbol} is zero")
        change = current_price - previous_close
        return cls(
            symbol=symbol,
            name=name,
            previous_close=previous_close,
            current_price=current_price,
            change=change,
            change_percent=change / previous_close * 100,
            volume=volume,
            pre_market_price=pre_market_price,
            pre_market_change=pre_market_change,
            pre_market_change_percent=pre_market_change_percent,
        )

    def __str__(self) -> str:
        return f"{self.symbol}: ${self.current_price:.2f} ({self.change_percent:+.2f}%)"


@dataclass(frozen=True)
class Headline:
    """
    A news article plus its keyword relevance score.
    """
    title: str
    description: str
    source: str
    published_at: str  # ISO 8601 as returned upstream, e.g. 2026-10-19T06:30:00Z
    url: str
    relevance_score: int = 0

    def __str__(self) -> str:
        return f"[{self.source}] {self.title} (Score: {self.relevance_score})"
